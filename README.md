# redblack

A red-black tree that keeps integer keys in sorted order. Inserting, finding
and erasing a key each take logarithmic time. Duplicate keys are allowed; an
equal key goes into the right subtree.

## Installation

```
pip install .
```

## Usage

```python
from redblack.tree import RBTree

tree = RBTree()
for key in (10, 5, 8, 34, 67, 23, 156, 24, 2, 12):
    tree.insert(key)

tree.minimum().key        # 2
tree.maximum().key        # 156

node = tree.find(23)      # a Node holding 23
tree.find(999)            # None: no node holds this key

tree.erase(node)          # removes that node from the tree
list(tree)                # keys in ascending order
tree.to_array(3)          # the three smallest keys: [2, 5, 8]

tree.clear()              # removes every node
tree.minimum()            # None: the tree is empty
```

## The API

The module `redblack.tree` holds three classes.

`Color` is an enum with the members `RED` and `BLACK`.

`Node` is a tree node with the attributes `key`, `color`, `parent`, `left`
and `right`.

`RBTree` is the tree. Each empty link points at `tree.nil`, a black sentinel
node that belongs to the tree. An empty tree has `tree.root is tree.nil`.

- `insert(key)` adds the key and returns the root node after rebalancing.
- `find(key)` returns a node holding the key, or `None`.
- `minimum()` and `maximum()` return the node with the smallest or largest key,
  or `None` if the tree is empty.
- `erase(node)` removes a node that belongs to the tree. After the call, the
  node's `parent`, `left` and `right` point at `tree.nil`.
- `to_array(n)` returns at most `n` keys in ascending order.
- `clear()` removes every node.
- Iterating over the tree yields its keys in ascending order.
- `left_rotate(x)` and `right_rotate(x)` are the rotations the tree uses to
  stay balanced. They are public so that code can inspect and test the tree's
  structure.

## Running the tests

```
pip install .[test]
pytest
```