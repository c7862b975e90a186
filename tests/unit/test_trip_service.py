"""Unit tests for trip persistence helpers.

Functions are called directly against temporary stores.
"""

import json

from services.rideshare_service.schemas import TripCreate
from services.rideshare_service.services.trip_service import (
    create_trip,
    delete_trip,
    list_trips,
)
from tests.factories import TripPayloadFactory


def test_create_trip_stores_camel_case_document(riders_store):
    trip_in = TripCreate.model_validate(TripPayloadFactory.create(name="Ada"))

    trip = create_trip(riders_store, trip_in)

    [document] = json.loads(riders_store.path.read_text(encoding="utf-8"))
    assert document["id"] == trip.id
    assert document["name"] == "Ada"
    assert document["sourceLng"] == 3.3213
    assert document["destLat"] == 6.4541
    assert document["createdAt"].endswith("Z")
    assert "source_lng" not in document


def test_create_trip_without_coordinates(riders_store):
    payload = TripPayloadFactory.create()
    for key in ("sourceLng", "sourceLat", "destLng", "destLat"):
        payload.pop(key)

    trip = create_trip(riders_store, TripCreate.model_validate(payload))

    assert trip.source_lng is None
    assert trip.dest_lat is None
    [document] = riders_store.read_all()
    assert not document.keys() & {"sourceLng", "sourceLat", "destLng", "destLat"}


def test_list_trips_skips_malformed_records(riders_store):
    good = create_trip(
        riders_store, TripCreate.model_validate(TripPayloadFactory.create())
    )
    documents = riders_store.read_all()
    documents.append({"id": 7, "name": "no route"})
    riders_store.write_all(documents)

    assert list_trips(riders_store) == [good]


def test_delete_trip(riders_store):
    trip = create_trip(
        riders_store, TripCreate.model_validate(TripPayloadFactory.create())
    )

    assert delete_trip(riders_store, trip.id) is True
    assert list_trips(riders_store) == []


def test_missing_fields_reports_empty_and_absent_values():
    trip_in = TripCreate.model_validate(
        {"name": "", "source": "Airport", "destination": "Downtown"}
    )

    assert trip_in.missing_fields() == ["name", "time"]


def test_missing_fields_accepts_whitespace_values():
    trip_in = TripCreate.model_validate(TripPayloadFactory.create(name=" "))

    assert trip_in.missing_fields() == []
