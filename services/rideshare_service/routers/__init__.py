"""Rideshare service routers package."""

from services.rideshare_service.routers.matches import router as matches_router
from services.rideshare_service.routers.trips import router as trips_router

__all__ = ["matches_router", "trips_router"]
