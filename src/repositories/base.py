from typing import List, Optional, Protocol, TypeVar
import uuid

T = TypeVar("T")


class Repository(Protocol[T]):
    """Keyed store for one entity type."""

    def get_by_id(self, id: uuid.UUID) -> Optional[T]:
        ...

    def get_all(self) -> List[T]:
        ...

    def update(self, entity: T) -> None:
        """Persist changes made to ``entity``, including new child records."""
        ...
