"""Models, enumerations and statistics for Destiny 2 Crucible activity data."""

__version__ = "0.1.0"