"""A small top-down role-playing game with quests, dialogue, combat and plain-text save games."""

__version__ = "0.1.0"