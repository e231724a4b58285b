from app.models.progress import Progress
from app.models.task import DayTasks

__all__ = ["Progress", "DayTasks"]
