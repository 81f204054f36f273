"""Create Obsidian notes from clipboard text or web pages."""

__version__ = "0.1.0"
