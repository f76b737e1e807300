"""Example App: a tabbed text viewer with a word list, line count and search."""

__version__ = "0.1.0"
