"""A red-black tree of ordered integer keys, in the ``tree`` module."""

__version__ = "0.1.0"
__all__ = ["tree"]