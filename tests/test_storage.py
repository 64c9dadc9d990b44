# ===============================================
# tests/test_storage.py
# Read-only person/note collaborators
# ===============================================
import json
from datetime import date
from types import SimpleNamespace
from unittest.mock import Mock

import pytest
import requests

from rolodex.errors import StorageUnavailable
from rolodex.storage import (
    HttpRepository,
    InMemoryRepository,
    JsonFileRepository,
    Note,
    build_repository,
)
from tests.conftest import NOTES, PERSONS


def write_store(tmp_path, persons=PERSONS, notes=NOTES):
    (tmp_path / "persons.json").write_text(json.dumps(persons), encoding="utf-8")
    (tmp_path / "notes.json").write_text(json.dumps(notes), encoding="utf-8")


# -------------------------
# Models
# -------------------------
def test_note_accepts_wire_format():
    note = Note.model_validate({
        "_id": "n1",
        "personId": "p1",
        "rawText": "hi",
        "meetings": ["2026-01-13", "2026-01-16T15:00:00.000Z"],
        "connections": None,
        "extractedEntities": None,
    })
    assert note.id == "n1"
    assert note.person_id == "p1"
    assert note.meetings == [date(2026, 1, 13), date(2026, 1, 16)]
    assert note.connections == []
    assert note.extracted_entities.companies == []


def test_to_wire_round_trips_camel_case(notes):
    wire = notes[0].to_wire()
    assert wire["personId"] == "p1"
    assert wire["meetings"] == ["2026-01-13"]
    assert Note.model_validate(wire) == notes[0]


# -------------------------
# In-memory
# -------------------------
def test_in_memory_lookups(repository):
    assert [p.id for p in repository.find_persons_by_ids(["p3", "p1"])] == ["p1", "p3"]
    assert [n.id for n in repository.find_notes_by_person_id("p2")] == ["n2"]
    assert [n.id for n in repository.find_notes_by_person_ids(["p1", "p3"])] == ["n1", "n3"]


def test_in_memory_returns_copies(repository):
    repository.find_all_notes().clear()
    assert len(repository.find_all_notes()) == 3


# -------------------------
# JSON files
# -------------------------
def test_json_files(tmp_path):
    write_store(tmp_path)
    repo = JsonFileRepository(tmp_path)
    assert [p.full_name for p in repo.find_all_persons()] == ["Jane Doe", "Bob Smith", "Alice Wong"]
    assert repo.find_notes_by_person_id("p3")[0].meetings == [date(2026, 1, 16)]


def test_json_files_missing_store_is_empty(tmp_path):
    repo = JsonFileRepository(tmp_path / "nope")
    assert repo.find_all_persons() == []
    assert repo.find_all_notes() == []


def test_json_files_corrupt_store(tmp_path):
    (tmp_path / "persons.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageUnavailable):
        JsonFileRepository(tmp_path).find_all_persons()


def test_json_files_invalid_record(tmp_path):
    write_store(tmp_path, persons=[{"_id": "p1"}])
    with pytest.raises(StorageUnavailable):
        JsonFileRepository(tmp_path).find_all_persons()


# -------------------------
# HTTP
# -------------------------
def fake_response(body):
    resp = Mock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = body
    return resp


def test_http_persons():
    session = Mock()
    session.get.return_value = fake_response({"success": True, "data": PERSONS})
    repo = HttpRepository("http://notes.local/", session=session, timeout=3)

    persons = repo.find_all_persons()
    assert [p.id for p in persons] == ["p1", "p2", "p3"]
    session.get.assert_called_once_with("http://notes.local/api/person", params=None, timeout=3)


def test_http_notes_by_person_ids():
    session = Mock()
    session.get.side_effect = [
        fake_response({"success": True, "data": [NOTES[0]]}),
        fake_response({"success": True, "data": [NOTES[2]]}),
    ]
    repo = HttpRepository("http://notes.local", session=session)

    notes = repo.find_notes_by_person_ids(["p1", "p3", "p1"])
    assert [n.id for n in notes] == ["n1", "n3"]
    assert [c.kwargs["params"] for c in session.get.call_args_list] == [{"personId": "p1"}, {"personId": "p3"}]


def test_http_network_error():
    session = Mock()
    session.get.side_effect = requests.ConnectionError("refused")
    with pytest.raises(StorageUnavailable, match="refused"):
        HttpRepository("http://notes.local", session=session).find_all_notes()


def test_http_error_envelope():
    session = Mock()
    session.get.return_value = fake_response({"success": False, "error": "boom"})
    with pytest.raises(StorageUnavailable, match="boom"):
        HttpRepository("http://notes.local", session=session).find_all_persons()


# -------------------------
# Factory
# -------------------------
def test_build_repository(tmp_path):
    cfg = SimpleNamespace(STORAGE_BACKEND="json", DATA_DIR=str(tmp_path),
                          NOTES_API_URL="http://notes.local", STORAGE_TIMEOUT=2.0)
    assert isinstance(build_repository(cfg), JsonFileRepository)

    cfg.STORAGE_BACKEND = "HTTP"
    repo = build_repository(cfg)
    assert isinstance(repo, HttpRepository)
    assert repo.timeout == 2.0

    cfg.STORAGE_BACKEND = "mongo"
    with pytest.raises(ValueError):
        build_repository(cfg)


def test_in_memory_defaults_empty():
    assert InMemoryRepository().find_all_persons() == []
