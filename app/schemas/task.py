"""Pydantic schemas for the task catalog."""
from pydantic import BaseModel, field_validator


class TasksOutSchema(BaseModel):
    tasks: list[str]


class TaskCatalogSchema(BaseModel):
    # keys accepted as 3, "3" or "day3"
    tasks: dict[int, list[str]]

    @field_validator("tasks", mode="before")
    @classmethod
    def strip_day_prefix(cls, value):
        if not isinstance(value, dict):
            return value
        return {
            (k[3:] if isinstance(k, str) and k.startswith("day") else k): v
            for k, v in value.items()
        }
