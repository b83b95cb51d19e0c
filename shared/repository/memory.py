import asyncio
from typing import Any, Iterable, List, Tuple

import structlog

from shared.exceptions import NotFoundError
from shared.observability import (
    kasir_memory_records,
    kasir_not_found_total,
    kasir_records_created_total,
)

from .base import Repository

logger = structlog.get_logger(__name__)


class InMemoryRepository(Repository):
    """
    Process-local store backed by a list.

    A single lock serializes every read and write, so identity assignment is
    atomic across concurrent creates. Identities come from a counter and are
    never reused after a delete. Records are copied on the way in and out.
    """

    model: Any = None
    fields: Tuple[str, ...] = ()

    def __init__(self, seed: Iterable[Any] = ()):
        self._records: List[Any] = [self._copy(r) for r in seed]
        self._next_id = max((r.id for r in self._records), default=0) + 1
        self._lock = asyncio.Lock()
        kasir_memory_records.labels(resource=self.resource).set(len(self._records))

    def _copy(self, record: Any) -> Any:
        values = {name: getattr(record, name) for name in self.fields}
        return self.model(id=record.id, **values)

    def _index_of(self, record_id: int) -> int:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        return -1

    def _not_found(self, operation: str, record_id: int) -> NotFoundError:
        kasir_not_found_total.labels(resource=self.resource, operation=operation).inc()
        return NotFoundError(self.resource, record_id)

    async def get_all(self) -> List[Any]:
        async with self._lock:
            return [self._copy(r) for r in self._records]

    async def get_by_id(self, record_id: int) -> Any:
        async with self._lock:
            i = self._index_of(record_id)
            if i < 0:
                raise self._not_found("get", record_id)
            return self._copy(self._records[i])

    async def create(self, record: Any) -> Any:
        async with self._lock:
            record.id = self._next_id
            self._next_id += 1
            self._records.append(self._copy(record))
            kasir_memory_records.labels(resource=self.resource).set(len(self._records))
        kasir_records_created_total.labels(resource=self.resource).inc()
        logger.info("record_created", resource=self.resource, id=record.id, store="memory")
        return record

    async def update(self, record: Any) -> Any:
        async with self._lock:
            i = self._index_of(record.id)
            if i < 0:
                raise self._not_found("update", record.id)
            self._records[i] = self._copy(record)
        return record

    async def delete(self, record_id: int) -> None:
        async with self._lock:
            i = self._index_of(record_id)
            if i < 0:
                raise self._not_found("delete", record_id)
            del self._records[i]
            kasir_memory_records.labels(resource=self.resource).set(len(self._records))
        logger.info("record_deleted", resource=self.resource, id=record_id, store="memory")
