"""Shared helpers for rideshare service routers."""

from typing import Optional, Tuple

from fastapi import HTTPException, status
from services.rideshare_service.schemas import TripCreate


def ensure_required_fields(trip_in: TripCreate) -> None:
    """Reject offers with a missing or blank name, source, destination or time."""
    if trip_in.missing_fields():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All fields are required",
        )


def require_route_query(
    source: Optional[str], destination: Optional[str]
) -> Tuple[str, str]:
    if not source or not destination:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Source and destination are required",
        )
    return source, destination
