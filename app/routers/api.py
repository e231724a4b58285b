"""API routes: JSON for user progress and the task catalog."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, now_ms
from app.db.session import get_db
from app.schemas.progress import (
    CompleteDayOutSchema,
    CompleteDaySchema,
    MessageOutSchema,
    ProgressOutSchema,
)
from app.schemas.task import TaskCatalogSchema, TasksOutSchema
from app.services.errors import ProgressError
from app.services.progress_engine import ProgressService
from app.services.store import ProgressStore, SqlProgressStore
from app.services.task_catalog import SqlTaskCatalog, TaskCatalog

router = APIRouter(prefix="/api", tags=["api"])


# ---------- dependencies ----------

def get_clock() -> Clock:
    return now_ms


def get_progress_store(db: Annotated[AsyncSession, Depends(get_db)]) -> ProgressStore:
    return SqlProgressStore(db)


def get_task_catalog(db: Annotated[AsyncSession, Depends(get_db)]) -> TaskCatalog:
    return SqlTaskCatalog(db)


def get_progress_service(
    store: Annotated[ProgressStore, Depends(get_progress_store)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ProgressService:
    return ProgressService(store, clock=clock)


def _http_error(exc: ProgressError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))


# ---------- progress ----------

@router.get("/user/{user_id}", response_model=ProgressOutSchema)
async def get_user_progress(
    user_id: str,
    service: Annotated[ProgressService, Depends(get_progress_service)],
):
    """Get (or lazily create) a user's progress; stale attempts come back reset."""
    view = await service.get_or_init(user_id)
    record = view.record
    return ProgressOutSchema(
        current_day=record.current_day,
        completed_days=record.completed_days,
        day_notes=record.day_notes,
        is_locked=view.is_locked,
        next_unlock_time=view.next_unlock_time,
        challenge_complete=view.challenge_complete,
        start_time=record.start_time,
        last_completed_time=record.last_completed_time,
    )


@router.post("/user/{user_id}/complete", response_model=CompleteDayOutSchema)
async def complete_day(
    user_id: str,
    body: CompleteDaySchema,
    service: Annotated[ProgressService, Depends(get_progress_service)],
):
    """Complete the user's current day; the day must match exactly."""
    try:
        result = await service.complete_day(user_id, body.day, body.note)
    except ProgressError as exc:
        raise _http_error(exc) from exc

    return CompleteDayOutSchema(
        current_day=result.current_day,
        next_unlock_time=result.next_unlock_time,
        challenge_complete=result.challenge_complete,
    )


@router.post("/user/{user_id}/reset", response_model=MessageOutSchema)
async def reset_progress(
    user_id: str,
    service: Annotated[ProgressService, Depends(get_progress_service)],
):
    await service.reset(user_id)
    return MessageOutSchema(message="Progress reset successfully")


# ---------- tasks ----------

@router.get("/tasks/{day}", response_model=TasksOutSchema)
async def get_tasks(
    day: int,
    catalog: Annotated[TaskCatalog, Depends(get_task_catalog)],
):
    try:
        tasks = await catalog.get(day)
    except ProgressError as exc:
        raise _http_error(exc) from exc
    return TasksOutSchema(tasks=tasks)


@router.get("/tasks", response_model=dict[str, list[str]])
async def get_all_tasks(catalog: Annotated[TaskCatalog, Depends(get_task_catalog)]):
    """Whole catalog keyed by day number (for admin/editing)."""
    tasks = await catalog.all()
    return {str(day): day_tasks for day, day_tasks in tasks.items()}


@router.put("/tasks", response_model=MessageOutSchema)
async def put_tasks(
    body: TaskCatalogSchema,
    catalog: Annotated[TaskCatalog, Depends(get_task_catalog)],
):
    """Replace the whole catalog (admin)."""
    await catalog.replace_all(body.tasks)
    return MessageOutSchema(message="Tasks updated successfully")
