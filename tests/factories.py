"""
Factories for creating valid test data.

Override any field via kwargs.

Usage:
    trip = TripFactory.create(source="Airport")
    payload = TripPayloadFactory.create(name="")
"""

import itertools

from libs.common.datetime_utils import utc_now_iso

_ids = itertools.count(1_700_000_000_000)


class TripFactory:
    @staticmethod
    def create(**overrides):
        from services.rideshare_service.models import Trip

        defaults = {
            "id": next(_ids),
            "name": "Test Traveller",
            "source": "Airport",
            "destination": "Downtown",
            "time": "2026-10-20T08:00",
            "created_at": utc_now_iso(),
        }
        defaults.update(overrides)
        return Trip(**defaults)


class TripPayloadFactory:
    """Request bodies for POST /api/riders and /api/passengers (camelCase)."""

    @staticmethod
    def create(**overrides) -> dict:
        defaults = {
            "name": "Test Traveller",
            "source": "Airport",
            "destination": "Downtown",
            "sourceLng": 3.3213,
            "sourceLat": 6.5774,
            "destLng": 3.3958,
            "destLat": 6.4541,
            "time": "2026-10-20T08:00",
        }
        defaults.update(overrides)
        return defaults
