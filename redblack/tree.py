"""A red-black tree of keys with a shared black sentinel node."""

from __future__ import annotations

from enum import Enum
from itertools import islice
from typing import Iterator


class Color(Enum):
    """Colour of a tree node."""

    RED = "red"
    BLACK = "black"


class Node:
    """A single tree node; links point at other nodes or the tree's sentinel."""

    __slots__ = ("key", "color", "parent", "left", "right")

    def __init__(self, key: int = 0, color: Color = Color.BLACK) -> None:
        self.key = key
        self.color = color
        self.parent: Node = self
        self.left: Node = self
        self.right: Node = self

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, color={self.color.name})"


class RBTree:
    """Red-black tree that allows duplicate keys.

    Empty links point at ``nil``, a black sentinel node owned by the tree.
    """

    def __init__(self) -> None:
        self.nil = Node(color=Color.BLACK)
        self.root: Node = self.nil

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not self.nil:
            while node is not self.nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def insert(self, key: int) -> Node:
        """Insert ``key`` and return the root of the tree after rebalancing."""
        parent = self.nil
        cur = self.root
        while cur is not self.nil:
            parent = cur
            cur = cur.left if key < cur.key else cur.right

        node = Node(key, Color.RED)
        node.parent = parent
        node.left = self.nil
        node.right = self.nil
        if parent is self.nil:
            self.root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._insert_fixup(node)
        return self.root

    def find(self, key: int) -> Node | None:
        """Return a node holding ``key``, or None if there is none."""
        cur = self.root
        while cur is not self.nil:
            if key == cur.key:
                return cur
            cur = cur.left if key < cur.key else cur.right
        return None

    def minimum(self) -> Node | None:
        """Return the node with the smallest key, or None for an empty tree."""
        if self.root is self.nil:
            return None
        return self._subtree_minimum(self.root)

    def maximum(self) -> Node | None:
        """Return the node with the largest key, or None for an empty tree."""
        if self.root is self.nil:
            return None
        cur = self.root
        while cur.right is not self.nil:
            cur = cur.right
        return cur

    def erase(self, node: Node) -> None:
        """Remove ``node`` from the tree."""
        moved = node
        moved_color = moved.color
        if node.left is self.nil:
            child = node.right
            self._transplant(node, node.right)
        elif node.right is self.nil:
            child = node.left
            self._transplant(node, node.left)
        else:
            moved = self._subtree_minimum(node.right)
            moved_color = moved.color
            child = moved.right
            if moved is not node.right:
                self._transplant(moved, moved.right)
                moved.right = node.right
                moved.right.parent = moved
            else:
                child.parent = moved
            self._transplant(node, moved)
            moved.left = node.left
            moved.left.parent = moved
            moved.color = node.color
        if moved_color is Color.BLACK:
            self._delete_fixup(child)
        node.parent = node.left = node.right = self.nil

    def to_array(self, n: int) -> list[int]:
        """Return at most ``n`` keys in ascending order."""
        return list(islice(self, max(n, 0)))

    def clear(self) -> None:
        """Remove every node from the tree."""
        while self.root is not self.nil:
            self.erase(self.root)

    def left_rotate(self, x: Node) -> None:
        """Rotate the subtree at ``x`` to the left."""
        y = x.right
        x.right = y.left
        if y.left is not self.nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def right_rotate(self, x: Node) -> None:
        """Rotate the subtree at ``x`` to the right."""
        y = x.left
        x.left = y.right
        if y.right is not self.nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.right = x
        x.parent = y

    def _subtree_minimum(self, node: Node) -> Node:
        while node.left is not self.nil:
            node = node.left
        return node

    def _transplant(self, old: Node, new: Node) -> None:
        if old.parent is self.nil:
            self.root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def _insert_fixup(self, z: Node) -> None:
        while z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self.left_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self.right_rotate(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self.right_rotate(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self.left_rotate(z.parent.parent)
        self.root.color = Color.BLACK

    def _delete_fixup(self, x: Node) -> None:
        while x is not self.root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self.left_rotate(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color is Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self.right_rotate(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self.left_rotate(x.parent)
                    x = self.root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self.right_rotate(x.parent)
                    w = x.parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color is Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self.left_rotate(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self.right_rotate(x.parent)
                    x = self.root
        x.color = Color.BLACK