from typing import Any, Dict, List, Tuple

import structlog
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import NotFoundError, StoreError
from shared.observability import (
    kasir_not_found_total,
    kasir_records_created_total,
    kasir_store_errors_total,
)

from .base import Repository

logger = structlog.get_logger(__name__)

# Driver-level socket errors (e.g. connection refused) are not wrapped by SQLAlchemy
STORE_FAILURES = (SQLAlchemyError, OSError)


class SqlRepository(Repository):
    """
    Repository over one mapped table.

    Subclasses set ``model`` (the mapped class) and ``fields`` (the columns
    written on insert/update, identity excluded). Every statement is built
    with SQLAlchemy constructs, so values always travel as bound parameters.
    """

    model: Any = None
    fields: Tuple[str, ...] = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    def _values(self, record: Any) -> Dict[str, Any]:
        return {name: getattr(record, name) for name in self.fields}

    async def _fail(self, operation: str, error: Exception) -> StoreError:
        await self.db.rollback()
        kasir_store_errors_total.labels(resource=self.resource).inc()
        logger.error("store_query_failed", resource=self.resource, operation=operation, error=str(error))
        return StoreError(f"{self.resource} {operation} failed: {error}")

    def _not_found(self, operation: str, record_id: int) -> NotFoundError:
        kasir_not_found_total.labels(resource=self.resource, operation=operation).inc()
        return NotFoundError(self.resource, record_id)

    async def get_all(self) -> List[Any]:
        try:
            result = await self.db.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())
        except STORE_FAILURES as e:
            raise await self._fail("get_all", e) from e

    async def get_by_id(self, record_id: int) -> Any:
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == record_id))
            record = result.scalars().first()
        except STORE_FAILURES as e:
            raise await self._fail("get", e) from e
        if record is None:
            raise self._not_found("get", record_id)
        return record

    async def create(self, record: Any) -> Any:
        record.id = None  # the store assigns identity
        try:
            self.db.add(record)
            await self.db.commit()
            await self.db.refresh(record)
        except STORE_FAILURES as e:
            raise await self._fail("create", e) from e
        kasir_records_created_total.labels(resource=self.resource).inc()
        logger.info("record_created", resource=self.resource, id=record.id)
        return record

    async def update(self, record: Any) -> Any:
        stmt = (
            update(self.model)
            .where(self.model.id == record.id)
            .values(**self._values(record))
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except STORE_FAILURES as e:
            raise await self._fail("update", e) from e
        if result.rowcount == 0:
            raise self._not_found("update", record.id)
        return record

    async def delete(self, record_id: int) -> None:
        stmt = (
            delete(self.model)
            .where(self.model.id == record_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except STORE_FAILURES as e:
            raise await self._fail("delete", e) from e
        if result.rowcount == 0:
            raise self._not_found("delete", record_id)
        logger.info("record_deleted", resource=self.resource, id=record_id)
