"""Game logic for a side-scrolling platformer: JSON documents, entities, stage editing, credits and settings."""

__version__ = "1.0.1"