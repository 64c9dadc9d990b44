# Reads persons/notes from the notes app REST API.
#   GET {base}/api/person            -> {"success": true, "data": [Person]}
#   GET {base}/api/note?personId=... -> {"success": true, "data": [Note]}

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import requests
from pydantic import ValidationError

from rolodex.errors import StorageUnavailable

from .base import Repository
from .models import Note, Person

logger = logging.getLogger("rolodex.storage")


class HttpRepository(Repository):
    def __init__(self, base_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise StorageUnavailable(f"GET {url} failed: {e}") from e

        if not isinstance(body, dict) or not body.get("success", False):
            error = body.get("error") if isinstance(body, dict) else None
            raise StorageUnavailable(f"GET {url} returned an error: {error or 'unexpected payload'}")
        return body.get("data") or []

    def find_all_persons(self) -> List[Person]:
        rows = self._get("/api/person")
        try:
            return [Person.model_validate(r) for r in rows]
        except ValidationError as e:
            raise StorageUnavailable(f"Malformed person payload: {e}") from e

    def find_all_notes(self) -> List[Note]:
        return self._notes()

    def find_notes_by_person_id(self, person_id: str) -> List[Note]:
        return self._notes(person_id)

    def find_notes_by_person_ids(self, ids: Iterable[str]) -> List[Note]:
        notes: List[Note] = []
        for person_id in dict.fromkeys(ids):
            notes.extend(self._notes(person_id))
        return notes

    def _notes(self, person_id: Optional[str] = None) -> List[Note]:
        params = {"personId": person_id} if person_id else None
        rows = self._get("/api/note", params=params)
        try:
            return [Note.model_validate(r) for r in rows]
        except ValidationError as e:
            raise StorageUnavailable(f"Malformed note payload: {e}") from e

    def close(self):
        self.session.close()
