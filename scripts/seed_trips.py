#!/usr/bin/env python3
"""
Seed sample rider and passenger offers into the flat-file stores.

Existing records are kept; pass --reset to start from empty files.
"""

import argparse
import os
import sys

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from libs.common.logging import configure_logging, get_logger
from libs.storage.stores import get_passengers_store, get_riders_store
from services.rideshare_service.schemas import TripCreate
from services.rideshare_service.services.trip_service import create_trip

logger = get_logger(__name__)

RIDERS = [
    {
        "name": "Amaka",
        "source": "Airport",
        "destination": "Downtown",
        "sourceLng": 3.3213,
        "sourceLat": 6.5774,
        "destLng": 3.3958,
        "destLat": 6.4541,
        "time": "2026-10-20T08:00",
    },
    {
        "name": "Tunde",
        "source": "University Campus",
        "destination": "Central Mall",
        "time": "2026-10-20T17:30",
    },
]

PASSENGERS = [
    {
        "name": "Chidi",
        "source": "Airport",
        "destination": "City Centre",
        "time": "2026-10-20T08:15",
    },
    {
        "name": "Zainab",
        "source": "Mall",
        "destination": "Suburb",
        "time": "2026-10-20T18:00",
    },
]


def seed_trips(reset: bool = False) -> None:
    for store, records in (
        (get_riders_store(), RIDERS),
        (get_passengers_store(), PASSENGERS),
    ):
        store.initialize()
        if reset:
            store.write_all([])
        for record in records:
            trip = create_trip(store, TripCreate.model_validate(record))
            logger.info("Seeded %s into %s", trip.name, store.path)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="empty the stores first")
    args = parser.parse_args()

    configure_logging()
    seed_trips(reset=args.reset)
