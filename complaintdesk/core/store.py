# complaintdesk/core/store.py

"""Collection-level access to the record store.

``read_all`` and ``write_all`` move a whole collection (``users`` or
``complaints``) in and out of the database as plain JSON records. Writes
replace the collection inside one transaction, so readers see either the old
or the new collection, never a mix.
"""

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from complaintdesk.core.exceptions import StorageError
from complaintdesk.models.users.user_models import User
from complaintdesk.models.support.complaint_models import Complaint
from complaintdesk.models.base.mixins import as_utc
from complaintdesk.schemas.store.record_schemas import UserRecord, ComplaintRecord
from complaintdesk.utils.logger import get_logger

logger = get_logger(__name__)

COLLECTIONS = {
    "users": (User, UserRecord),
    "complaints": (Complaint, ComplaintRecord),
}


def _collection(entity_type: str):
    try:
        return COLLECTIONS[entity_type]
    except KeyError:
        raise ValueError(f"Unknown collection: {entity_type}")


def _to_row_values(record_model, record: dict) -> dict:
    parsed = record_model.model_validate(record)
    values = parsed.model_dump()
    if values.get("updated_at") is None:
        values["updated_at"] = values["created_at"]
    if "responses" in values:
        # threads are stored snake_case, without absent author fields
        values["responses"] = [
            entry.model_copy(update={"created_at": as_utc(entry.created_at)})
            .model_dump(mode="json", exclude_none=True)
            for entry in parsed.responses
        ]
    return values


# =====================================================
# READ
# =====================================================
async def read_all(db: AsyncSession, entity_type: str) -> list[dict]:
    model, record_model = _collection(entity_type)

    try:
        result = await db.execute(select(model).order_by(model.seq))
        rows = result.scalars().all()
    except SQLAlchemyError:
        logger.exception("Collection read failed", extra={"collection": entity_type})
        raise StorageError(f"Could not read {entity_type}")

    return [
        record_model.model_validate(row).model_dump(
            mode="json", by_alias=True, exclude_none=True
        )
        for row in rows
    ]


# =====================================================
# WRITE (FULL REPLACE)
# =====================================================
async def write_all(db: AsyncSession, entity_type: str, records: list[dict]) -> None:
    model, record_model = _collection(entity_type)

    # validate everything before touching the table
    rows = [model(**_to_row_values(record_model, r)) for r in records]

    try:
        await db.execute(delete(model))
        db.add_all(rows)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Collection write failed", extra={"collection": entity_type})
        raise StorageError(f"Could not write {entity_type}")

    logger.info(
        "Collection replaced",
        extra={"collection": entity_type, "count": len(rows)},
    )
