"""Rider and passenger offer routes."""

from typing import List

from fastapi import APIRouter, Depends, status
from libs.common.logging import get_logger
from libs.storage.json_store import JsonFileStore
from libs.storage.stores import get_passengers_store, get_riders_store
from services.rideshare_service.models import Trip
from services.rideshare_service.routers._helpers import ensure_required_fields
from services.rideshare_service.schemas import MessageResponse, TripCreate
from services.rideshare_service.services.trip_service import (
    create_trip,
    delete_trip,
    list_trips,
)

logger = get_logger(__name__)

router = APIRouter(tags=["trips"])


@router.get(
    "/riders", response_model=List[Trip], response_model_exclude_none=True
)
async def list_riders(store: JsonFileStore = Depends(get_riders_store)):
    """List every rider offer in insertion order."""
    return list_trips(store)


@router.get(
    "/passengers", response_model=List[Trip], response_model_exclude_none=True
)
async def list_passengers(store: JsonFileStore = Depends(get_passengers_store)):
    """List every passenger offer in insertion order."""
    return list_trips(store)


@router.post(
    "/riders",
    response_model=Trip,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_rider(
    trip_in: TripCreate,
    store: JsonFileStore = Depends(get_riders_store),
):
    ensure_required_fields(trip_in)
    rider = create_trip(store, trip_in)
    logger.info("Created rider %s (%s -> %s)", rider.id, rider.source, rider.destination)
    return rider


@router.post(
    "/passengers",
    response_model=Trip,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_passenger(
    trip_in: TripCreate,
    store: JsonFileStore = Depends(get_passengers_store),
):
    ensure_required_fields(trip_in)
    passenger = create_trip(store, trip_in)
    logger.info(
        "Created passenger %s (%s -> %s)",
        passenger.id,
        passenger.source,
        passenger.destination,
    )
    return passenger


@router.delete("/riders/{trip_id}", response_model=MessageResponse)
async def delete_rider(
    trip_id: int,
    store: JsonFileStore = Depends(get_riders_store),
):
    """Delete a rider offer. Unknown ids are accepted and change nothing."""
    if not delete_trip(store, trip_id):
        logger.info("Rider %s not found, nothing deleted", trip_id)
    return MessageResponse(message="Rider deleted")


@router.delete("/passengers/{trip_id}", response_model=MessageResponse)
async def delete_passenger(
    trip_id: int,
    store: JsonFileStore = Depends(get_passengers_store),
):
    """Delete a passenger offer. Unknown ids are accepted and change nothing."""
    if not delete_trip(store, trip_id):
        logger.info("Passenger %s not found, nothing deleted", trip_id)
    return MessageResponse(message="Passenger deleted")
