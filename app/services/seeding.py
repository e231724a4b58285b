"""Seed the task catalog with sample tasks if it is empty."""
import json
import logging
from pathlib import Path

from app.core.config import BASE_DIR, get_settings
from app.services.task_catalog import TaskCatalog

logger = logging.getLogger(__name__)

DEFAULT_TASKS: dict[int, list[str]] = {
    1: [
        "Complete 20 pushups",
        "Practice box breathing for a total of 3 minutes",
        "No sugar for the day",
        "Capture a perspective distortion shot",
        "Learn Game Theory to see how strategy influences outcomes",
    ],
    2: [
        "Hold a plank for a total of 2 minutes",
        "Zen sit for 5 minutes in quiet stillness",
        "Make bed in under 60 seconds",
        "Draw something without lifting the pen",
        "Learn about The Overview Effect experienced by astronauts",
    ],
    3: [
        "Perform bodyweight squats for a total of 3 minutes",
        "Shadow box for a total of 3 minutes",
        "Eat one meal phone-free",
        "Draw your room as a simple map and label the areas",
        "Study the Great Depression and its long-term economic impact",
    ],
    4: [
        "Walk briskly for 20 minutes",
        "Complete a 5-4-3-2-1 grounding check",
        "Write your sleep time and end the day accordingly",
        "Sketch a simple artwork using your non-dominant hand",
        "Understand Butterfly Effect and small changes compounding",
    ],
    5: [
        "Hold a wall-sit for a total of 3 minutes",
        "Do Nadi Shodhana for 3 minutes",
        "Track your expenses for today",
        "Choose an everyday object and refine its design",
        "Understand game theory via one prisoner's dilemma",
    ],
    6: [
        "Do step-ups for a total of 3 minutes",
        "Practice Qigong Inner Smile for 2 minutes",
        "Wake and drink 500 ml of water",
        "Write a letter to your future self @futureme.org",
        "Explore neuroplasticity to understand brain change",
    ],
    7: [
        "Run/jog a total distance of 1 kilometer",
        "Hold gentle gaze on the vast sky",
        "Take 1-minute cold shower",
        "Make 20-second sound composition",
        "Learn what dopamine baseline is and how habits shift it",
    ],
}


def load_seed_tasks(path: str | None = None) -> dict[int, list[str]]:
    """Tasks from a JSON file ({"1": [...]} or {"day1": [...]}), else the defaults."""
    if not path:
        return DEFAULT_TASKS
    seed_path = Path(path)
    if not seed_path.is_absolute():
        seed_path = BASE_DIR / seed_path
    data = json.loads(seed_path.read_text(encoding="utf-8"))
    return {int(str(day).removeprefix("day")): list(tasks) for day, tasks in data.items()}


async def seed_tasks(catalog: TaskCatalog) -> bool:
    """Fill an empty catalog. Returns True if anything was written."""
    if not await catalog.is_empty():
        return False
    settings = get_settings()
    tasks = load_seed_tasks(settings.tasks_seed_file)
    await catalog.replace_all(tasks)
    logger.info("Seeded task catalog with %d days", len(tasks))
    return True
