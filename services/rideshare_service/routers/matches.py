"""Match search routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from libs.common.logging import get_logger
from libs.storage.json_store import JsonFileStore
from libs.storage.stores import get_passengers_store, get_riders_store
from services.rideshare_service.models import Trip
from services.rideshare_service.routers._helpers import require_route_query
from services.rideshare_service.services.matching import filter_matches
from services.rideshare_service.services.trip_service import list_trips

logger = get_logger(__name__)

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get(
    "/rider", response_model=List[Trip], response_model_exclude_none=True
)
async def match_passengers_for_rider(
    source: Optional[str] = Query(None),
    destination: Optional[str] = Query(None),
    store: JsonFileStore = Depends(get_passengers_store),
):
    """Passengers whose route overlaps the rider's source or destination."""
    source, destination = require_route_query(source, destination)
    passengers = list_trips(store)
    matches = filter_matches(source, destination, passengers)
    logger.info(
        "Rider search %s -> %s matched %d of %d passengers",
        source,
        destination,
        len(matches),
        len(passengers),
    )
    return matches


@router.get(
    "/passenger", response_model=List[Trip], response_model_exclude_none=True
)
async def match_riders_for_passenger(
    source: Optional[str] = Query(None),
    destination: Optional[str] = Query(None),
    store: JsonFileStore = Depends(get_riders_store),
):
    """Riders whose route overlaps the passenger's source or destination."""
    source, destination = require_route_query(source, destination)
    riders = list_trips(store)
    matches = filter_matches(source, destination, riders, query_first=False)
    logger.info(
        "Passenger search %s -> %s matched %d of %d riders",
        source,
        destination,
        len(matches),
        len(riders),
    )
    return matches
