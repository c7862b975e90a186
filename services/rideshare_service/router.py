from fastapi import APIRouter

from services.rideshare_service.routers import matches_router, trips_router

router = APIRouter(prefix="/api")
router.include_router(trips_router)
router.include_router(matches_router)
