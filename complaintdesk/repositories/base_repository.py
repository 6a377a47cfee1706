"""Shared data access for the record collections.

Every collection keeps its insertion order in ``seq`` and guards updates with
the ``version`` column: an update that races another writer fails instead of
silently overwriting it.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from complaintdesk.core.exceptions import AppException
from complaintdesk.constants.error_codes import ErrorCode

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    model: Type[ModelT]
    label: str
    not_found_code: ErrorCode = ErrorCode.NOT_FOUND
    conflict_code: ErrorCode = ErrorCode.CONFLICT

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> list[ModelT]:
        result = await self.db.execute(select(self.model).order_by(self.model.seq))
        return list(result.scalars().all())

    async def get_by_id(self, record_id: str) -> Optional[ModelT]:
        return await self.db.scalar(
            select(self.model).where(self.model.id == record_id)
        )

    async def update(
        self,
        record_id: str,
        values: dict[str, Any],
        version: Optional[int] = None,
    ) -> ModelT:
        """Shallow-merge ``values`` over the stored record.

        ``version`` is the version the caller based its change on; when
        omitted the currently stored version is used.
        """
        current = await self.get_by_id(record_id)
        if current is None:
            raise AppException(404, f"{self.label} not found", self.not_found_code)

        expected = current.version if version is None else version

        stmt = (
            update(self.model)
            .where(
                self.model.id == record_id,
                self.model.version == expected,
            )
            .values(
                **values,
                version=self.model.version + 1,
            )
            .returning(self.model)
            .execution_options(populate_existing=True)
        )

        result = await self.db.execute(stmt)
        updated = result.scalar_one_or_none()

        if updated is None:
            await self.db.rollback()
            raise AppException(
                409,
                f"{self.label} was modified by another request",
                self.conflict_code,
            )

        await self.db.commit()
        return updated
