# library_core/repositories/base.py
from typing import TypeVar, Generic, Optional, List, Type
from sqlalchemy.orm import Session
from library_core.models import Base

T = TypeVar('T', bound=Base)

class BaseRepository(Generic[T]):
    model: Type[T]

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, id_value: int) -> Optional[T]:
        return self.session.get(self.model, id_value)

    def get_all(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[T]:
        query = self.session.query(self.model)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()

    def _commit(self) -> None:
        """Commit, rolling back first if the engine rejects the write"""
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
