"""
In-Memory Store Implementation

Holds records in a Python list for the lifetime of the process. Nothing
is written to disk.

Every operation takes a re-entrant lock so the store stays consistent if
the ASGI server runs handlers on worker threads; an update or delete of
one identifier never interleaves with another mutation.
"""

import logging
import threading
from typing import List, Optional

from grubdash.services.store.base import BaseStore, T

logger = logging.getLogger(__name__)


class InMemoryStore(BaseStore[T]):
    """
    List-backed store.

    Attributes:
        collection: Name used in log messages (e.g., "dishes")

    Example:
        >>> store = InMemoryStore("dishes")
        >>> store.append(dish)
        >>> len(store)
        1
    """

    def __init__(self, collection: str):
        self._name = collection
        self._records: List[T] = []
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    def _index_of(self, entity_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == entity_id:
                return index
        return -1

    def get(self, entity_id: str) -> Optional[T]:
        with self._lock:
            index = self._index_of(entity_id)
            return self._records[index] if index >= 0 else None

    def list(self) -> List[T]:
        with self._lock:
            return list(self._records)

    def append(self, entity: T) -> T:
        with self._lock:
            if self._index_of(entity.id) >= 0:
                raise ValueError(f"Duplicate id in {self._name}: {entity.id}")
            self._records.append(entity)
            logger.debug(f"{self._name}: appended {entity.id}")
            return entity

    def replace(self, entity_id: str, entity: T) -> T:
        with self._lock:
            index = self._index_of(entity_id)
            if index < 0:
                raise KeyError(entity_id)
            self._records[index] = entity
            logger.debug(f"{self._name}: replaced {entity_id}")
            return entity

    def remove(self, entity_id: str) -> bool:
        with self._lock:
            index = self._index_of(entity_id)
            if index < 0:
                return False
            del self._records[index]
            logger.debug(f"{self._name}: removed {entity_id}")
            return True

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __repr__(self):
        return f"<InMemoryStore {self.name} ({len(self)} records)>"
