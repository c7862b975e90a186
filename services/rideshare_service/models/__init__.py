"""Rideshare Service models package."""

from services.rideshare_service.models.core import Trip
from services.rideshare_service.models.enums import MatchQuality

__all__ = [
    "MatchQuality",
    "Trip",
]
