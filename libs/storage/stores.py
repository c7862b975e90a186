from libs.common.config import get_settings
from libs.storage.json_store import JsonFileStore


def get_riders_store() -> JsonFileStore:
    """
    FastAPI dependency that returns the riders store.
    """
    return JsonFileStore(get_settings().riders_path)


def get_passengers_store() -> JsonFileStore:
    """
    FastAPI dependency that returns the passengers store.
    """
    return JsonFileStore(get_settings().passengers_path)


def initialize_stores() -> None:
    """Create both data files if they do not exist yet."""
    for store in (get_riders_store(), get_passengers_store()):
        store.initialize()
