# Read-only person/note collaborators for the search engine.

from .base import InMemoryRepository, Repository
from .json_files import JsonFileRepository
from .models import Connection, ExtractedEntities, NetworkMention, Note, Person
from .remote import HttpRepository


def build_repository(settings) -> Repository:
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "json":
        return JsonFileRepository(settings.DATA_DIR)
    if backend == "http":
        return HttpRepository(settings.NOTES_API_URL, timeout=settings.STORAGE_TIMEOUT)
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND!r} (expected 'json' or 'http')")


__all__ = [
    "Repository",
    "InMemoryRepository",
    "JsonFileRepository",
    "HttpRepository",
    "build_repository",
    "Person",
    "Note",
    "Connection",
    "NetworkMention",
    "ExtractedEntities",
]
