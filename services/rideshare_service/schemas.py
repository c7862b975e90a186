"""Request and response schemas for the rideshare service."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

REQUIRED_TRIP_FIELDS = ("name", "source", "destination", "time")


class TripCreate(BaseModel):
    """Incoming rider or passenger offer.

    Required text fields are optional at the schema level so that a missing
    field is reported with the same 400 as an empty one.
    """

    name: Optional[str] = None
    source: Optional[str] = None
    destination: Optional[str] = None
    source_lng: Optional[float] = None
    source_lat: Optional[float] = None
    dest_lng: Optional[float] = None
    dest_lat: Optional[float] = None
    time: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def missing_fields(self) -> List[str]:
        return [
            field
            for field in REQUIRED_TRIP_FIELDS
            if not getattr(self, field)
        ]


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str
