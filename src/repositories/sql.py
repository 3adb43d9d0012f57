import logging
from typing import Generic, List, Optional, Type, TypeVar
import uuid

from sqlmodel import Session, SQLModel, select

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SQLModel)


class SqlModelRepository(Generic[T]):
    """Repository backed by a SQLModel session.

    The session is owned by the caller (one per request), the repository
    only commits on ``update``.
    """

    def __init__(self, session: Session, model: Type[T]) -> None:
        self._session = session
        self._model = model

    def get_by_id(self, id: uuid.UUID) -> Optional[T]:
        return self._session.get(self._model, id)

    def get_all(self) -> List[T]:
        return list(self._session.exec(select(self._model)).all())

    def update(self, entity: T) -> None:
        self._session.add(entity)
        self._session.commit()
        self._session.refresh(entity)
        logger.debug("Updated %s %s", self._model.__name__, getattr(entity, "id", None))
