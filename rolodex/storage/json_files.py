# Read-only view over the notes app's flat-file store:
#   <data_dir>/persons.json   [ {_id, firstName, lastName, ...}, ... ]
#   <data_dir>/notes.json     [ {_id, personId, rawText, ...}, ... ]
# Missing files read as empty collections.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Type, TypeVar

from pydantic import ValidationError

from rolodex.errors import StorageUnavailable

from .base import Repository
from .models import Note, Person, Record

logger = logging.getLogger("rolodex.storage")

PERSONS_FILE = "persons.json"
NOTES_FILE = "notes.json"

R = TypeVar("R", bound=Record)


class JsonFileRepository(Repository):
    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)

    def _load(self, filename: str, model: Type[R]) -> List[R]:
        path = self.data_dir / filename
        if not path.exists():
            logger.debug("store file missing, treating as empty", extra={"fields": {"path": str(path)}})
            return []
        try:
            with path.open("r", encoding="utf-8") as f:
                rows = json.load(f) or []
            return [model.model_validate(row) for row in rows]
        except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
            raise StorageUnavailable(f"Could not read {path}: {e}") from e

    def find_all_persons(self) -> List[Person]:
        return self._load(PERSONS_FILE, Person)

    def find_all_notes(self) -> List[Note]:
        return self._load(NOTES_FILE, Note)
