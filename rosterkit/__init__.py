"""Student rosters in lists and binary search trees, with edits, sorts and tree statistics."""

__version__ = "0.1.0"
__all__ = ["record", "dlist", "slist", "tree", "recursive", "treestats", "cli"]