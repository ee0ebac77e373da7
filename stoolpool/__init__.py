"""StoolPool digestive-health journal core."""

__version__ = "1.0.0"
