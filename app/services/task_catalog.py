"""Task catalog: ordered task descriptions per challenge day, with bulk replace."""
import json
import logging
from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.task import DayTasks
from app.services.errors import NotFoundError

logger = logging.getLogger(__name__)

TASKS_NOT_FOUND = "Tasks not found for this day"


class TaskCatalog(ABC):
    @abstractmethod
    async def get(self, day: int) -> list[str]:
        """Tasks for one day; NotFoundError if the day has none."""

    @abstractmethod
    async def all(self) -> dict[int, list[str]]:
        ...

    @abstractmethod
    async def replace_all(self, catalog: Mapping[int, Sequence[str]]) -> None:
        """Replace the whole catalog. Days missing from ``catalog`` are dropped."""

    async def is_empty(self) -> bool:
        return not await self.all()


class InMemoryTaskCatalog(TaskCatalog):
    def __init__(self, catalog: Mapping[int, Sequence[str]] | None = None):
        self._tasks: dict[int, list[str]] = {}
        if catalog:
            self._tasks = {int(day): list(tasks) for day, tasks in catalog.items()}

    async def get(self, day: int) -> list[str]:
        if day not in self._tasks:
            raise NotFoundError(TASKS_NOT_FOUND)
        return list(self._tasks[day])

    async def all(self) -> dict[int, list[str]]:
        return {day: list(tasks) for day, tasks in sorted(self._tasks.items())}

    async def replace_all(self, catalog: Mapping[int, Sequence[str]]) -> None:
        self._tasks = {int(day): list(tasks) for day, tasks in catalog.items()}
        logger.info("Task catalog replaced: %d days", len(self._tasks))


class SqlTaskCatalog(TaskCatalog):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, day: int) -> list[str]:
        row = await self.db.get(DayTasks, day)
        if row is None:
            raise NotFoundError(TASKS_NOT_FOUND)
        return json.loads(row.tasks_json)

    async def all(self) -> dict[int, list[str]]:
        result = await self.db.execute(select(DayTasks).order_by(DayTasks.day))
        return {row.day: json.loads(row.tasks_json) for row in result.scalars()}

    async def is_empty(self) -> bool:
        result = await self.db.execute(select(DayTasks.day).limit(1))
        return result.first() is None

    async def replace_all(self, catalog: Mapping[int, Sequence[str]]) -> None:
        result = await self.db.execute(select(DayTasks))
        existing = {row.day: row for row in result.scalars()}
        wanted = {int(day): list(tasks) for day, tasks in catalog.items()}

        for day, row in existing.items():
            if day not in wanted:
                await self.db.delete(row)
        for day, tasks in wanted.items():
            payload = json.dumps(tasks, ensure_ascii=False)
            row = existing.get(day)
            if row is None:
                self.db.add(DayTasks(day=day, tasks_json=payload))
            else:
                row.tasks_json = payload

        await self.db.commit()
        logger.info("Task catalog replaced: %d days", len(wanted))
