from typing import Any, Callable, Generic, List, Optional, TypeVar
from app.db.store import Store
from app.models.base import Record

ModelType = TypeVar("ModelType", bound=Record)

class CRUDBase(Generic[ModelType]):
    """Acesso genérico a uma coleção do Store por varredura linear."""

    def __init__(self, collection: str, key: Callable[[ModelType], Any]):
        self.collection = collection
        self.key = key

    def items(self, store: Store) -> List[ModelType]:
        return getattr(store, self.collection)

    def get(self, store: Store, id: Any) -> Optional[ModelType]:
        with store.lock:
            return next((obj for obj in self.items(store) if self.key(obj) == id), None)

    def get_multi(self, store: Store) -> List[ModelType]:
        with store.lock:
            return list(self.items(store))
