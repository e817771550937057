from typing import Generic, Optional, TypeVar

from app import db

T = TypeVar("T")


class BaseRepository(Generic[T]):
    def __init__(self, model: T):
        self.model = model
        self.session = db.session

    def create(self, commit: bool = True, **kwargs) -> T:
        instance: T = self.model(**kwargs)
        self.session.add(instance)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        return instance

    def get_by_id(self, id: int) -> Optional[T]:
        return self.session.get(self.model, id)

    def delete_all(self) -> int:
        deleted = self.session.query(self.model).delete(synchronize_session=False)
        self.session.commit()
        return deleted

    def count(self) -> int:
        return self.model.query.count()
