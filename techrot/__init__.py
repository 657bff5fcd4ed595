"""Data model for a post-apocalyptic text role-playing game: items, weapons, stats, player and NPCs."""

__version__ = "0.1.0"

__all__ = ["catalog", "cli", "item", "npc", "player", "stats", "weapons"]