"""Small data structures of strings: stack, queue, dynamic array, hash table, binary tree and linked lists."""

__version__ = "0.1.0"

__all__ = ["dlist", "dynarray", "fifo", "hashtable", "slist", "stack", "tree"]