import json

import pytest

from app.services.errors import NotFoundError
from app.services.seeding import DEFAULT_TASKS, load_seed_tasks, seed_tasks
from app.services.task_catalog import InMemoryTaskCatalog, SqlTaskCatalog


@pytest.fixture(params=["memory", "sql"])
def any_catalog(request, db_session):
    if request.param == "memory":
        return InMemoryTaskCatalog()
    return SqlTaskCatalog(db_session)


async def test_unseeded_day_not_found(any_catalog):
    with pytest.raises(NotFoundError):
        await any_catalog.get(3)
    assert await any_catalog.is_empty()


async def test_put_then_get(any_catalog):
    await any_catalog.replace_all({3: ["a", "b"]})
    assert await any_catalog.get(3) == ["a", "b"]
    assert not await any_catalog.is_empty()


async def test_replace_all_drops_missing_days(any_catalog):
    await any_catalog.replace_all({1: ["x"], 2: ["y"]})
    await any_catalog.replace_all({2: ["z", "w"], 4: ["q"]})

    assert await any_catalog.all() == {2: ["z", "w"], 4: ["q"]}
    with pytest.raises(NotFoundError):
        await any_catalog.get(1)


async def test_all_is_ordered_by_day(any_catalog):
    await any_catalog.replace_all({3: ["c"], 1: ["a"], 2: ["b"]})
    assert list((await any_catalog.all()).keys()) == [1, 2, 3]


async def test_seed_fills_empty_catalog(any_catalog, monkeypatch):
    monkeypatch.delenv("TASKS_SEED_FILE", raising=False)
    assert await seed_tasks(any_catalog) is True
    assert await any_catalog.all() == DEFAULT_TASKS
    assert len(await any_catalog.get(7)) == 5


async def test_seed_leaves_existing_catalog(any_catalog):
    await any_catalog.replace_all({1: ["custom"]})
    assert await seed_tasks(any_catalog) is False
    assert await any_catalog.all() == {1: ["custom"]}


def test_load_seed_tasks_from_file(tmp_path):
    seed_file = tmp_path / "tasks.json"
    seed_file.write_text(json.dumps({"day1": ["one"], "2": ["two", "three"]}), encoding="utf-8")

    assert load_seed_tasks(str(seed_file)) == {1: ["one"], 2: ["two", "three"]}


def test_load_seed_tasks_defaults():
    assert load_seed_tasks(None) is DEFAULT_TASKS
    assert sorted(DEFAULT_TASKS) == list(range(1, 8))
