"""
Repository

Read-only interface the search engine uses to get person and note snapshots.
Every call returns a full in-memory list; implementations raise
StorageUnavailable when the backing store cannot be read.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from .models import Note, Person


class Repository(ABC):
    """Abstract base class for person/note sources."""

    @abstractmethod
    def find_all_persons(self) -> List[Person]:
        pass

    @abstractmethod
    def find_all_notes(self) -> List[Note]:
        pass

    def find_persons_by_ids(self, ids: Iterable[str]) -> List[Person]:
        wanted = set(ids)
        return [p for p in self.find_all_persons() if p.id in wanted]

    def find_notes_by_person_id(self, person_id: str) -> List[Note]:
        return [n for n in self.find_all_notes() if n.person_id == person_id]

    def find_notes_by_person_ids(self, ids: Iterable[str]) -> List[Note]:
        wanted = set(ids)
        return [n for n in self.find_all_notes() if n.person_id in wanted]


class InMemoryRepository(Repository):
    """Serves snapshots handed in at construction."""

    def __init__(self, persons: Iterable[Person] = (), notes: Iterable[Note] = ()):
        self._persons = list(persons)
        self._notes = list(notes)

    def find_all_persons(self) -> List[Person]:
        return list(self._persons)

    def find_all_notes(self) -> List[Note]:
        return list(self._notes)
