from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Trip(BaseModel):
    """A stored rider or passenger offer.

    Stored and served with camelCase keys (``sourceLng``, ``createdAt``...).
    Coordinates are kept for clients but play no part in matching.
    """

    id: int
    name: str
    source: str
    destination: str
    source_lng: Optional[float] = None
    source_lat: Optional[float] = None
    dest_lng: Optional[float] = None
    dest_lat: Optional[float] = None
    time: str
    created_at: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def __repr__(self):
        return f"<Trip {self.id} {self.source} -> {self.destination}>"
