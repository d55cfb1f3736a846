"""Integer heaps, hash table, AVL tree and weighted graph with a timed command runner."""

__version__ = "0.1.0"
__all__ = ["avl_tree", "commands", "graph", "hashtable", "max_heap", "min_heap"]