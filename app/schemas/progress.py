"""Pydantic schemas for progress records and the progress API. Wire names are camelCase."""
from pydantic import BaseModel, Field, StrictInt
from pydantic.alias_generators import to_camel


class CamelSchema(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ProgressRecord(CamelSchema):
    current_day: int = 1  # 1..8, 8 = challenge complete
    start_time: int  # epoch ms
    completed_days: list[int] = Field(default_factory=list)
    day_notes: dict[str, str] = Field(default_factory=dict)
    last_completed_time: int | None = None
    version: int = Field(default=0, exclude=True)  # 0 = not persisted yet


class ProgressView(BaseModel):
    record: ProgressRecord
    is_locked: bool
    next_unlock_time: int | None
    challenge_complete: bool


class CompletionResult(BaseModel):
    current_day: int
    next_unlock_time: int | None
    challenge_complete: bool


class ProgressOutSchema(CamelSchema):
    current_day: int
    completed_days: list[int]
    day_notes: dict[str, str]
    is_locked: bool
    next_unlock_time: int | None
    challenge_complete: bool
    start_time: int
    last_completed_time: int | None


class CompleteDaySchema(BaseModel):
    day: StrictInt  # "1" and true are rejected, not coerced
    note: str | None = None


class CompleteDayOutSchema(CamelSchema):
    success: bool = True
    current_day: int
    next_unlock_time: int | None
    challenge_complete: bool


class MessageOutSchema(BaseModel):
    success: bool = True
    message: str
