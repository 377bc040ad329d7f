"""
Store Abstract Base Class

Defines the interface contract for the collections that hold dishes and
orders. Handlers only talk to this interface, so the in-memory
implementation can be swapped for a persistent one without touching any
validation logic.

Design Pattern: Strategy Pattern
    - Handlers receive a store; they never reach for module-level lists
    - Tests inject a fresh store per test case
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseStore(ABC, Generic[T]):
    """
    Abstract ordered collection of records keyed by their ``id``.

    Records keep insertion order: ``list()`` returns them in the order
    they were appended, and ``replace()`` keeps a record's position.

    Example:
        >>> store = get_dish_store()
        >>> store.append(dish)
        >>> store.get(dish.id) == dish
        True
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the collection name.

        Returns:
            str: Collection name (e.g., "dishes", "orders")
        """
        pass

    @abstractmethod
    def get(self, entity_id: str) -> Optional[T]:
        """
        Find a record by identifier.

        Args:
            entity_id: Identifier to look up

        Returns:
            The record, or None when no record carries that identifier
        """
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """
        Return every record in collection order.

        The returned list is a snapshot; mutating it does not change the store.
        """
        pass

    @abstractmethod
    def append(self, entity: T) -> T:
        """
        Add a record to the end of the collection.

        Raises:
            ValueError: If a record with the same id is already stored
        """
        pass

    @abstractmethod
    def replace(self, entity_id: str, entity: T) -> T:
        """
        Swap the record stored under ``entity_id`` for ``entity``.

        Raises:
            KeyError: If nothing is stored under ``entity_id``
        """
        pass

    @abstractmethod
    def remove(self, entity_id: str) -> bool:
        """
        Delete the record stored under ``entity_id``.

        Returns:
            bool: True if a record was removed, False if none matched
        """
        pass

    def extend(self, entities: Iterable[T]) -> None:
        """Append several records in order."""
        for entity in entities:
            self.append(entity)

    @abstractmethod
    def clear(self) -> None:
        """Drop every record."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
