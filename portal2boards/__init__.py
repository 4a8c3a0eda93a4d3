"""Portal 2 leaderboard client, JSON entities, map tables and byte-pattern helpers."""

__version__ = "1.0.0"
__all__ = ["client", "entities", "maps", "memory"]