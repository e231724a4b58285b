from app.services.errors import ConflictError, InvalidDayError, NotFoundError, ProgressError
from app.services.progress_engine import ProgressService
from app.services.seeding import seed_tasks
from app.services.store import InMemoryProgressStore, ProgressStore, SqlProgressStore
from app.services.task_catalog import InMemoryTaskCatalog, SqlTaskCatalog, TaskCatalog

__all__ = [
    "ConflictError",
    "InvalidDayError",
    "NotFoundError",
    "ProgressError",
    "ProgressService",
    "seed_tasks",
    "InMemoryProgressStore",
    "ProgressStore",
    "SqlProgressStore",
    "InMemoryTaskCatalog",
    "SqlTaskCatalog",
    "TaskCatalog",
]
