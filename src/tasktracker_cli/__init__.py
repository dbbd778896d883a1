"""Task Tracker CLI - a single-user task tracker backed by a JSON file."""

__version__ = "0.1.0"
