from app.schemas.progress import (
    CompleteDayOutSchema,
    CompleteDaySchema,
    CompletionResult,
    MessageOutSchema,
    ProgressOutSchema,
    ProgressRecord,
    ProgressView,
)
from app.schemas.task import TaskCatalogSchema, TasksOutSchema

__all__ = [
    "CompleteDayOutSchema",
    "CompleteDaySchema",
    "CompletionResult",
    "MessageOutSchema",
    "ProgressOutSchema",
    "ProgressRecord",
    "ProgressView",
    "TaskCatalogSchema",
    "TasksOutSchema",
]
