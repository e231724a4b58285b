import pytest

from app.schemas.progress import ProgressRecord
from app.services.errors import ConflictError
from app.services.store import InMemoryProgressStore, SqlProgressStore
from tests.conftest import T0


@pytest.fixture(params=["memory", "sql"])
def any_store(request, db_session):
    if request.param == "memory":
        return InMemoryProgressStore()
    return SqlProgressStore(db_session)


async def test_unknown_user_is_none(any_store):
    assert await any_store.get("nobody") is None


async def test_save_and_read_back(any_store):
    record = ProgressRecord(
        current_day=3,
        start_time=T0,
        completed_days=[1, 2],
        day_notes={"1": "first", "2": "второй"},
        last_completed_time=T0 + 500,
    )

    saved = await any_store.save("u1", record)
    loaded = await any_store.get("u1")

    assert saved.version == 1
    assert loaded.version == 1
    assert loaded.current_day == 3
    assert loaded.completed_days == [1, 2]
    assert loaded.day_notes == {"1": "first", "2": "второй"}
    assert loaded.last_completed_time == T0 + 500


async def test_save_bumps_version(any_store):
    saved = await any_store.save("u1", ProgressRecord(start_time=T0))
    saved = await any_store.save("u1", saved.model_copy(update={"current_day": 2}))
    assert saved.version == 2
    assert (await any_store.get("u1")).current_day == 2


async def test_stale_version_conflicts(any_store):
    first = await any_store.save("u1", ProgressRecord(start_time=T0))
    await any_store.save("u1", first.model_copy(update={"current_day": 2}))

    with pytest.raises(ConflictError):
        await any_store.save("u1", first.model_copy(update={"current_day": 5}))

    assert (await any_store.get("u1")).current_day == 2


async def test_double_create_conflicts(any_store):
    await any_store.save("u1", ProgressRecord(start_time=T0))
    with pytest.raises(ConflictError):
        await any_store.save("u1", ProgressRecord(start_time=T0 + 1))


async def test_overwrite_ignores_version(any_store):
    first = await any_store.save("u1", ProgressRecord(start_time=T0))
    await any_store.save("u1", first.model_copy(update={"current_day": 2}))

    overwritten = await any_store.overwrite("u1", ProgressRecord(start_time=T0 + 10))

    assert overwritten.version == 3
    loaded = await any_store.get("u1")
    assert loaded.current_day == 1
    assert loaded.start_time == T0 + 10


async def test_overwrite_creates_missing(any_store):
    created = await any_store.overwrite("u2", ProgressRecord(start_time=T0))
    assert created.version == 1
    assert (await any_store.get("u2")).start_time == T0


async def test_memory_store_returns_copies():
    store = InMemoryProgressStore()
    await store.save("u1", ProgressRecord(start_time=T0))
    loaded = await store.get("u1")
    loaded.completed_days.append(1)
    assert (await store.get("u1")).completed_days == []
