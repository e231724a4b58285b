"""Challenge progress state machine: day sequencing, unlock slots, stale reset."""
import logging

from app.core.clock import Clock, now_ms
from app.schemas.progress import CompletionResult, ProgressRecord, ProgressView
from app.services.errors import InvalidDayError, NotFoundError
from app.services.locks import UserLockRegistry, user_locks
from app.services.store import ProgressStore

logger = logging.getLogger(__name__)

# One challenge day = one 10-hour unlock slot; 7 slots = 70h outer deadline
TOTAL_DAYS = 7
UNLOCK_SLOT_MS = 10 * 60 * 60 * 1000
CHALLENGE_DEADLINE_MS = TOTAL_DAYS * UNLOCK_SLOT_MS


def initial_record(now: int) -> ProgressRecord:
    return ProgressRecord(current_day=1, start_time=now)


def elapsed_units(record: ProgressRecord, now: int) -> int:
    """Whole unlock slots elapsed since start."""
    return (now - record.start_time) // UNLOCK_SLOT_MS


def is_challenge_complete(record: ProgressRecord) -> bool:
    return record.current_day > TOTAL_DAYS


def is_stale(record: ProgressRecord, now: int) -> bool:
    """True once the outer deadline passed without finishing the challenge."""
    return elapsed_units(record, now) >= TOTAL_DAYS and not is_challenge_complete(record)


def next_unlock_time(record: ProgressRecord) -> int:
    """Instant the next day opens, in fixed slots from start (not from last completion)."""
    return record.start_time + record.current_day * UNLOCK_SLOT_MS


def is_locked(record: ProgressRecord, now: int) -> bool:
    return record.last_completed_time is not None and now < next_unlock_time(record)


def build_view(record: ProgressRecord, now: int) -> ProgressView:
    complete = is_challenge_complete(record)
    return ProgressView(
        record=record,
        is_locked=is_locked(record, now),
        next_unlock_time=None if complete else next_unlock_time(record),
        challenge_complete=complete,
    )


def apply_completion(record: ProgressRecord, day: int, note: str | None, now: int) -> ProgressRecord:
    """Return the record with `day` completed; raise InvalidDayError unless day is current."""
    if day != record.current_day or is_challenge_complete(record):
        raise InvalidDayError(expected=record.current_day, got=day)

    completed_days = list(record.completed_days)
    if day not in completed_days:
        completed_days.append(day)

    day_notes = dict(record.day_notes)
    if note:
        day_notes[str(day)] = note

    return record.model_copy(
        update={
            "current_day": day + 1,
            "completed_days": completed_days,
            "day_notes": day_notes,
            "last_completed_time": now,
        }
    )


class ProgressService:
    """Runs the state machine against a store, a clock and per-user locks."""

    def __init__(self, store: ProgressStore, clock: Clock = now_ms, locks: UserLockRegistry = user_locks):
        self.store = store
        self.clock = clock
        self.locks = locks

    async def get_or_init(self, user_id: str) -> ProgressView:
        async with self.locks.lock_for(user_id):
            now = self.clock()
            record = await self.store.get(user_id)

            if record is None:
                logger.info("Creating progress for user %s", user_id)
                record = await self.store.save(user_id, initial_record(now))

            if is_stale(record, now):
                logger.info(
                    "User %s exceeded the %d-day window on day %d - resetting",
                    user_id, TOTAL_DAYS, record.current_day,
                )
                record = await self.store.overwrite(user_id, initial_record(now))

            return build_view(record, now)

    async def complete_day(self, user_id: str, day: int, note: str | None = None) -> CompletionResult:
        async with self.locks.lock_for(user_id):
            record = await self.store.get(user_id)
            if record is None:
                logger.warning("Completion for unknown user %s", user_id)
                raise NotFoundError("User not found")

            now = self.clock()
            try:
                updated = apply_completion(record, day, note, now)
            except InvalidDayError:
                logger.warning("Invalid day for %s: expected %d, got %s", user_id, record.current_day, day)
                raise

            updated = await self.store.save(user_id, updated)
            logger.info("Day %d completed for %s", day, user_id)

            complete = is_challenge_complete(updated)
            return CompletionResult(
                current_day=updated.current_day,
                next_unlock_time=None if complete else next_unlock_time(updated),
                challenge_complete=complete,
            )

    async def reset(self, user_id: str) -> None:
        async with self.locks.lock_for(user_id):
            await self.store.overwrite(user_id, initial_record(self.clock()))
            logger.info("User %s reset", user_id)
