"""Record, view, filter, edit, delete and sort incident reports from the terminal."""

__version__ = "1.0.0"