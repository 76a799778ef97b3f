"""
Tests for task file load/save, the session layer and config resolution.
"""

import logging

import pytest

from ticklist import config
from ticklist.core import repository, service
from ticklist.core.exceptions import InvalidInputError, StorageError, TicklistError
from ticklist.core.store import TaskStore
from ticklist.core.models import Task


# --- repository.load / save ---

def test_load_missing_file_is_empty(tmp_path):
    assert repository.load(tmp_path / "nope.txt") == TaskStore()


def test_load_empty_file_matches_missing_file(tmp_path):
    empty = tmp_path / "empty.txt"
    empty.write_text("")

    assert repository.load(empty) == repository.load(tmp_path / "missing.txt")


def test_save_writes_encoded_store(tmp_path):
    path = tmp_path / "tasks.txt"
    store = TaskStore()
    store.add("buy milk")
    store.add("walk | dog")
    store.complete(1)

    repository.save(path, store)

    assert path.read_bytes() == "1|buy milk\n0|walk | dog".encode("utf-8")


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "tasks.txt"
    store = TaskStore()
    store.add("ünïcödé")
    store.add("")
    store.complete(2)

    repository.save(path, store)

    assert repository.load(path) == store


def test_save_empty_store_writes_empty_file(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("0|old\n")

    repository.save(path, TaskStore())

    assert path.read_text() == ""
    assert repository.load(path) == TaskStore()


def test_save_creates_parent_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "tasks.txt"
    repository.save(path, TaskStore())
    assert path.exists()


def test_load_reads_crlf_file(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"1|a\r\n0|b\r\n")

    assert repository.load(path).list() == [Task(1, "a", True), Task(2, "b", False)]


def test_load_unreadable_path_raises_storage_error(tmp_path):
    """A path that exists but can't be read as a file is an I/O failure."""
    directory = tmp_path / "tasks.txt"
    directory.mkdir()

    with pytest.raises(StorageError) as excinfo:
        repository.load(directory)

    assert isinstance(excinfo.value.cause, OSError)
    assert excinfo.value.__cause__ is excinfo.value.cause
    assert excinfo.value.path == directory
    assert isinstance(excinfo.value, TicklistError)


def test_load_invalid_utf8_raises_storage_error(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"0|\xff\xfe broken")

    with pytest.raises(StorageError):
        repository.load(path)


def test_save_failure_leaves_store_untouched(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    store = TaskStore()
    store.add("keep me")
    before = store.list()

    with pytest.raises(StorageError) as excinfo:
        repository.save(blocker / "tasks.txt", store)

    assert "write" in str(excinfo.value)
    assert store.list() == before


def test_save_failure_is_logged(tmp_path, caplog):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")

    with caplog.at_level(logging.WARNING, logger="ticklist"):
        with pytest.raises(StorageError):
            repository.save(blocker / "tasks.txt", TaskStore())

    assert any("Failed to write" in r.message for r in caplog.records)


# --- service.open_session / TaskSession ---

def test_open_session_uses_env_path(tasks_file):
    tasks_file.write_text("0|from env")

    session = service.open_session()

    assert session.path == tasks_file
    assert session.store.list() == [Task(1, "from env", False)]
    assert session.load_error is None


def test_open_session_load_failure_gives_empty_store(tmp_path):
    directory = tmp_path / "dir"
    directory.mkdir()

    session = service.open_session(directory)

    assert session.store == TaskStore()
    assert isinstance(session.load_error, StorageError)


def test_session_save_clears_dirty(tasks_file):
    session = service.open_session()
    session.store.add("a")
    session.dirty = True

    session.save()

    assert session.dirty is False
    assert tasks_file.read_text() == "0|a"


def test_session_try_save_returns_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    session = service.open_session(blocker / "tasks.txt")
    session.store.add("a")
    session.dirty = True

    error = session.try_save()

    assert isinstance(error, StorageError)
    assert session.dirty is True
    assert len(session.store) == 1


# --- service parsing helpers ---

def test_parse_task_ids():
    assert service.parse_task_ids("3") == [3]
    assert service.parse_task_ids("1, 2,5,") == [1, 2, 5]


@pytest.mark.parametrize("raw", ["", ",", "abc", "1,x", "1.5"])
def test_parse_task_ids_rejects_bad_input(raw):
    with pytest.raises(InvalidInputError):
        service.parse_task_ids(raw)


def test_validate_description():
    assert service.validate_description("  buy milk  ") == "buy milk"
    assert service.validate_description("a|b") == "a|b"

    with pytest.raises(InvalidInputError):
        service.validate_description("   ")
    with pytest.raises(InvalidInputError):
        service.validate_description("two\nlines")


# --- config ---

def test_config_override_beats_env(tasks_file, tmp_path):
    other = tmp_path / "other.txt"
    assert config.get_tasks_path(other) == other
    assert config.get_tasks_path() == tasks_file


def test_config_default_path(monkeypatch):
    monkeypatch.delenv("TICKLIST_FILE", raising=False)
    assert config.get_tasks_path() == config.TASKS_PATH
    assert config.TASKS_PATH.name == "tasks.txt"


def test_config_log_level(monkeypatch):
    monkeypatch.setenv("TICKLIST_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG

    monkeypatch.setenv("TICKLIST_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.ERROR


def test_load_name_too_long_raises_storage_error(tmp_path):
    """stat() errors other than "missing" are read failures, not crashes."""
    path = tmp_path / ("x" * 300)

    with pytest.raises(StorageError) as excinfo:
        repository.load(path)

    assert isinstance(excinfo.value.cause, OSError)


def test_open_session_name_too_long_gives_empty_store(tmp_path):
    session = service.open_session(tmp_path / ("x" * 300))

    assert session.store == TaskStore()
    assert isinstance(session.load_error, StorageError)


def test_load_missing_parent_directory_is_empty(tmp_path):
    assert repository.load(tmp_path / "nowhere" / "tasks.txt") == TaskStore()
