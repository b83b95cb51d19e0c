from abc import ABC, abstractmethod
from typing import Any, List


class Repository(ABC):
    """
    CRUD contract shared by every resource store.

    Records are mapped model instances. ``create`` writes the store-assigned
    identity back onto the record it was given. ``get_by_id``, ``update`` and
    ``delete`` raise NotFoundError when no row matches; any other store
    failure surfaces as StoreError.
    """

    resource: str = "record"

    @abstractmethod
    async def get_all(self) -> List[Any]: ...

    @abstractmethod
    async def get_by_id(self, record_id: int) -> Any: ...

    @abstractmethod
    async def create(self, record: Any) -> Any: ...

    @abstractmethod
    async def update(self, record: Any) -> Any: ...

    @abstractmethod
    async def delete(self, record_id: int) -> None: ...
