"""Game-programming algorithms: a chained hash table, sorts and searches, collision tests and pathfinding."""

__version__ = "0.1.0"
__all__ = ["collision", "hashtable", "pathfinding", "sorting"]