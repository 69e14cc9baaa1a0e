import json
import os
import stat

import pytest
from taskcell.core.task import (
    InMemoryTaskStore,
    SnapshotError,
    Task,
    TaskSnapshot,
    TaskStatus,
    read_snapshot,
    write_snapshot,
)
from taskcell.core.task.snapshot import decode_snapshot


@pytest.fixture(name="snapshot_path")
def _snapshot_path_fixture(tmp_path):
    return tmp_path / "storage.json"


def _populated_store() -> InMemoryTaskStore:
    store = InMemoryTaskStore()
    for name in ("buy milk", "walk dog", "écrire", "fix bug"):
        store.create_task(name)
    store.delete_task(2)
    store.update_task(Task(id=3, name="écrire", status=TaskStatus.COMPLETE))
    return store


def test_save_then_load_reproduces_tasks(snapshot_path):
    original = _populated_store()
    original.save(snapshot_path)

    restored = InMemoryTaskStore()
    restored.load(snapshot_path)

    assert restored.list_tasks() == original.list_tasks()
    assert restored.get_task(3).status == TaskStatus.COMPLETE


def test_loaded_store_continues_id_sequence(snapshot_path):
    original = _populated_store()
    original.save(snapshot_path)

    restored = InMemoryTaskStore()
    restored.load(snapshot_path)
    created = restored.create_task("next")

    assert created.id == 5
    assert created.id not in {t.id for t in original.list_tasks()}


def test_counter_survives_when_newest_task_deleted(snapshot_path):
    store = InMemoryTaskStore()
    store.create_task("a")
    store.create_task("b")
    store.delete_task(2)
    store.save(snapshot_path)

    restored = InMemoryTaskStore()
    restored.load(snapshot_path)

    assert restored.create_task("c").id == 3


def test_snapshot_file_layout(snapshot_path):
    store = InMemoryTaskStore()
    store.create_task("a")
    store.save(snapshot_path)

    document = json.loads(snapshot_path.read_text(encoding="utf-8"))
    assert document == {
        "version": 1,
        "next_id": 1,
        "tasks": [{"id": 1, "name": "a", "status": 0}],
    }


def test_load_missing_file_starts_empty(tmp_path):
    store = InMemoryTaskStore()
    store.load(tmp_path / "missing.json")

    assert store.list_tasks() == []
    assert store.create_task("first").id == 1


def test_load_corrupt_file_starts_empty(snapshot_path):
    snapshot_path.write_text("{ not json", encoding="utf-8")

    store = InMemoryTaskStore()
    store.load(snapshot_path)

    assert store.list_tasks() == []
    assert store.create_task("first").id == 1


def test_load_empty_snapshot_resets_counter(snapshot_path):
    snapshot_path.write_text(
        json.dumps({"version": 1, "next_id": 7, "tasks": []}), encoding="utf-8"
    )

    store = InMemoryTaskStore()
    store.load(snapshot_path)

    assert store.create_task("first").id == 1


def test_load_replaces_existing_contents(snapshot_path):
    _populated_store().save(snapshot_path)

    store = InMemoryTaskStore()
    for _ in range(10):
        store.create_task("stale")
    store.load(snapshot_path)

    assert [t.id for t in store.list_tasks()] == [4, 3, 1]


def test_save_leaves_no_temporary_files(snapshot_path):
    store = _populated_store()
    store.save(snapshot_path)
    store.save(snapshot_path)

    assert [p.name for p in snapshot_path.parent.iterdir()] == [snapshot_path.name]


def test_save_creates_parent_directories(tmp_path):
    target = tmp_path / "nested" / "dir" / "storage.json"
    _populated_store().save(target)

    assert read_snapshot(target).next_id == 4


def test_write_snapshot_overwrites_previous(snapshot_path):
    write_snapshot(snapshot_path, TaskSnapshot(next_id=1, tasks=[Task(id=1, name="a")]))
    write_snapshot(snapshot_path, TaskSnapshot(next_id=2, tasks=[Task(id=2, name="b")]))

    assert read_snapshot(snapshot_path).tasks == [Task(id=2, name="b")]


def test_read_snapshot_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_snapshot(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "document",
    [
        "{ not json",
        json.dumps({"version": 2, "next_id": 0, "tasks": []}),
        json.dumps({"version": 1, "next_id": -1, "tasks": []}),
        json.dumps(
            {
                "version": 1,
                "next_id": 2,
                "tasks": [
                    {"id": 1, "name": "a", "status": 0},
                    {"id": 1, "name": "b", "status": 0},
                ],
            }
        ),
        json.dumps(
            {"version": 1, "next_id": 1, "tasks": [{"id": 5, "name": "a", "status": 0}]}
        ),
        json.dumps(
            {"version": 1, "next_id": 1, "tasks": [{"id": 0, "name": "a", "status": 0}]}
        ),
        json.dumps(
            {"version": 1, "next_id": 1, "tasks": [{"id": 1, "name": "a", "status": 9}]}
        ),
    ],
)
def test_decode_rejects_invalid_documents(document):
    with pytest.raises(SnapshotError):
        decode_snapshot(document)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_save_keeps_existing_file_mode(snapshot_path):
    snapshot_path.write_text("{}", encoding="utf-8")
    snapshot_path.chmod(0o644)

    _populated_store().save(snapshot_path)

    assert stat.S_IMODE(snapshot_path.stat().st_mode) == 0o644


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_new_snapshot_follows_umask(snapshot_path):
    old_umask = os.umask(0o022)
    try:
        _populated_store().save(snapshot_path)
    finally:
        os.umask(old_umask)

    assert stat.S_IMODE(snapshot_path.stat().st_mode) == 0o644
