"""Progress record stores: an in-memory one and an async SQLAlchemy one.

Both compare the record's ``version`` on ``save`` and raise ConflictError on a
mismatch; ``overwrite`` replaces unconditionally (used by resets).
"""
import json
from abc import ABC, abstractmethod

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.progress import Progress
from app.schemas.progress import ProgressRecord
from app.services.errors import ConflictError


class ProgressStore(ABC):
    @abstractmethod
    async def get(self, user_id: str) -> ProgressRecord | None:
        """Return the stored record or None for an unseen user id."""

    @abstractmethod
    async def save(self, user_id: str, record: ProgressRecord) -> ProgressRecord:
        """Write a record read at ``record.version``; return it at its new version."""

    @abstractmethod
    async def overwrite(self, user_id: str, record: ProgressRecord) -> ProgressRecord:
        """Write a record regardless of the stored version."""


class InMemoryProgressStore(ProgressStore):
    def __init__(self):
        self._records: dict[str, ProgressRecord] = {}

    async def get(self, user_id: str) -> ProgressRecord | None:
        record = self._records.get(user_id)
        return record.model_copy(deep=True) if record else None

    async def save(self, user_id: str, record: ProgressRecord) -> ProgressRecord:
        current = self._records.get(user_id)
        stored_version = current.version if current else 0
        if record.version != stored_version:
            raise ConflictError(f"Progress for {user_id} changed concurrently")
        return self._put(user_id, record, stored_version + 1)

    async def overwrite(self, user_id: str, record: ProgressRecord) -> ProgressRecord:
        current = self._records.get(user_id)
        return self._put(user_id, record, (current.version if current else 0) + 1)

    def _put(self, user_id: str, record: ProgressRecord, version: int) -> ProgressRecord:
        stored = record.model_copy(update={"version": version}, deep=True)
        self._records[user_id] = stored
        return stored.model_copy(deep=True)


def _to_record(row: Progress) -> ProgressRecord:
    return ProgressRecord(
        current_day=row.current_day,
        start_time=row.start_time,
        completed_days=json.loads(row.completed_days_json),
        day_notes=json.loads(row.day_notes_json),
        last_completed_time=row.last_completed_time,
        version=row.version,
    )


def _columns(record: ProgressRecord) -> dict:
    return {
        "current_day": record.current_day,
        "start_time": record.start_time,
        "completed_days_json": json.dumps(record.completed_days),
        "day_notes_json": json.dumps(record.day_notes, ensure_ascii=False),
        "last_completed_time": record.last_completed_time,
    }


class SqlProgressStore(ProgressStore):
    """One committed transaction per write."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: str) -> ProgressRecord | None:
        result = await self.db.execute(
            select(Progress)
            .where(Progress.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()
        return _to_record(row) if row else None

    async def save(self, user_id: str, record: ProgressRecord) -> ProgressRecord:
        new_version = record.version + 1
        if record.version == 0:
            try:
                await self.db.execute(
                    insert(Progress).values(user_id=user_id, version=new_version, **_columns(record))
                )
                await self.db.commit()
            except IntegrityError as exc:
                await self.db.rollback()
                raise ConflictError(f"Progress for {user_id} already exists") from exc
        else:
            result = await self.db.execute(
                update(Progress)
                .where(Progress.user_id == user_id, Progress.version == record.version)
                .values(version=new_version, **_columns(record))
            )
            if result.rowcount == 0:
                await self.db.rollback()
                raise ConflictError(f"Progress for {user_id} changed concurrently")
            await self.db.commit()
        return record.model_copy(update={"version": new_version})

    async def overwrite(self, user_id: str, record: ProgressRecord) -> ProgressRecord:
        row = await self.db.get(Progress, user_id, populate_existing=True)
        if row is None:
            row = Progress(user_id=user_id, version=1, **_columns(record))
            self.db.add(row)
        else:
            for key, value in _columns(record).items():
                setattr(row, key, value)
            row.version = row.version + 1
        await self.db.commit()
        return record.model_copy(update={"version": row.version})
