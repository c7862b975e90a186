"""Flat-file JSON storage.

Each store owns one file holding a JSON array of documents. Every write
rewrites the whole file; there is no locking between writers.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from libs.common.datetime_utils import epoch_millis
from libs.common.logging import get_logger

logger = get_logger(__name__)

Document = Dict[str, Any]


class StorageError(Exception):
    """Raised when a store cannot persist its documents."""


class JsonFileStore:
    """Append/delete store over a single JSON array file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"<JsonFileStore {self.path}>"

    def initialize(self) -> None:
        """Create the parent directory and an empty array file if missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.write_text("[]", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not initialize {self.path}: {e}") from e

    def read_all(self) -> List[Document]:
        """
        Return every stored document in file order.

        A missing, unreadable or malformed file is logged and read as empty.
        Array items that are not objects are logged and dropped.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw)
        except FileNotFoundError:
            logger.warning("Data file %s does not exist, reading as empty", self.path)
            return []
        except (OSError, ValueError) as e:
            logger.error("Error reading data from %s: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.error("Data file %s does not hold a JSON array", self.path)
            return []

        documents = [item for item in data if isinstance(item, dict)]
        if len(documents) != len(data):
            logger.warning(
                "Dropped %d non-object entries from %s",
                len(data) - len(documents),
                self.path,
            )
        return documents

    def write_all(self, documents: List[Document]) -> None:
        try:
            self.path.write_text(json.dumps(documents, indent=2), encoding="utf-8")
        except (OSError, TypeError) as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

    def next_id(self, documents: List[Document]) -> int:
        """
        Time-derived identifier, strictly greater than any stored one.

        Two inserts inside the same millisecond would otherwise collide.
        """
        candidate = epoch_millis()
        ids = [doc["id"] for doc in documents if isinstance(doc.get("id"), int)]
        if ids and candidate <= max(ids):
            candidate = max(ids) + 1
        return candidate

    def append(self, document: Document) -> Document:
        """Assign an ``id`` to ``document``, append it and persist."""
        documents = self.read_all()
        stored = {"id": self.next_id(documents), **document}
        documents.append(stored)
        self.write_all(documents)
        return stored

    def delete(self, document_id: int) -> bool:
        """Remove documents with ``document_id``; return whether any were removed."""
        documents = self.read_all()
        remaining = [doc for doc in documents if doc.get("id") != document_id]
        self.write_all(remaining)
        return len(remaining) != len(documents)
