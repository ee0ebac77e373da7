"""SQLAlchemy models."""

from stoolpool.models.health_entry import HealthEntry

__all__ = ["HealthEntry"]
