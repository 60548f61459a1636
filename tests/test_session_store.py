"""Tests for in-memory and file-backed session storage."""

from cvstudio.core.schemas import Profile
from cvstudio.core.session_store import SessionStore


def test_in_memory_roundtrip():
    store = SessionStore()
    session = store.create(job_field="Design")
    assert store.get(session.id) == session
    assert session.job_field == "Design"
    assert store.create().job_field == "General"


def test_save_replaces_session():
    store = SessionStore()
    session = store.create()
    store.save(session.model_copy(update={"profile": Profile(summary="Updated")}))
    assert store.get(session.id).profile.summary == "Updated"


def test_delete():
    store = SessionStore()
    session = store.create()
    assert store.delete(session.id)
    assert store.get(session.id) is None
    assert not store.delete(session.id)


def test_persisted_sessions_survive_restart(tmp_path):
    session = SessionStore(str(tmp_path)).create(job_field="Finance")
    assert (tmp_path / f"{session.id}.json").exists()

    reloaded = SessionStore(str(tmp_path)).get(session.id)
    assert reloaded == session


def test_delete_removes_file(tmp_path):
    store = SessionStore(str(tmp_path))
    session = store.create()
    store.delete(session.id)
    assert not (tmp_path / f"{session.id}.json").exists()
    assert SessionStore(str(tmp_path)).get(session.id) is None


def test_unwritable_storage_falls_back_to_memory(tmp_path):
    blocker = tmp_path / "sessions"
    blocker.write_text("not a directory")

    store = SessionStore(str(blocker))
    session = store.create()
    assert store.get(session.id) == session


def test_corrupt_file_is_ignored(tmp_path):
    (tmp_path / "abc123.json").write_text("{not json")
    assert SessionStore(str(tmp_path)).get("abc123") is None


def test_ids_outside_the_id_alphabet_never_touch_disk(tmp_path):
    store = SessionStore(str(tmp_path))
    assert store.get("../etc/passwd") is None
    assert not store.delete("../x")


def test_least_recently_used_session_evicted():
    store = SessionStore(max_sessions=2)
    first, second = store.create(), store.create()
    store.get(first.id)
    third = store.create()

    assert store.get(second.id) is None
    assert store.get(first.id) == first
    assert store.get(third.id) == third


def test_evicted_session_reloads_from_disk(tmp_path):
    store = SessionStore(str(tmp_path), max_sessions=1)
    first = store.create()
    store.create()
    assert store.get(first.id) == first
