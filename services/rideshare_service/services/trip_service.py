"""
Trip persistence on top of the flat-file stores.

Converts between stored camelCase documents and ``Trip`` models. Records
that no longer validate are skipped rather than failing the whole listing.
"""

from typing import List

from pydantic import ValidationError

from libs.common.datetime_utils import utc_now_iso
from libs.common.logging import get_logger
from libs.storage.json_store import JsonFileStore
from services.rideshare_service.models import Trip
from services.rideshare_service.schemas import TripCreate

logger = get_logger(__name__)


def list_trips(store: JsonFileStore) -> List[Trip]:
    trips = []
    for document in store.read_all():
        try:
            trips.append(Trip.model_validate(document))
        except ValidationError as e:
            logger.warning(
                "Skipping malformed record %r in %s (%d validation errors)",
                document.get("id"),
                store.path,
                e.error_count(),
            )
    return trips


def create_trip(store: JsonFileStore, trip_in: TripCreate) -> Trip:
    # Coordinates the client did not send are left out of the record.
    document = trip_in.model_dump(by_alias=True, exclude_none=True)
    document["createdAt"] = utc_now_iso()
    stored = store.append(document)
    return Trip.model_validate(stored)


def delete_trip(store: JsonFileStore, trip_id: int) -> bool:
    return store.delete(trip_id)
