"""ticklist - a personal task list kept in a flat text file."""

__version__ = "0.1.0"
