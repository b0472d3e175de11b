"""
Base Repository — Repository Pattern (GoF)

Generic data access shared by every aggregate repository. Methods here never
commit; the caller owns the transaction.
"""
from typing import Any, Dict, Generic, Iterable, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from stockwatch.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def get_by_id(self, entity_id: Any) -> Optional[ModelType]:
        return self.db.get(self.model, entity_id)

    def get_many_by_ids(self, ids: Iterable[Any]) -> Dict[Any, ModelType]:
        """Fetch every row in ``ids`` with one query, keyed by id."""
        id_set = set(ids)
        if not id_set:
            return {}
        rows = self.db.query(self.model).filter(self.model.id.in_(id_set)).all()
        return {row.id: row for row in rows}

    def add(self, entity: ModelType) -> ModelType:
        """Stage ``entity`` and flush so database defaults and ids are populated."""
        self.db.add(entity)
        self.db.flush()
        return entity
