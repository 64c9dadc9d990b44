"""Pytest configuration and shared fixtures."""

import pytest

from rolodex.search import QueryAnalyzer, SearchEngine, SearchTuning
from rolodex.storage import InMemoryRepository, Note, Person
from tests.factories import fixed_clock

# ============================================================================
# Sample data
# ============================================================================

PERSONS = [
    {"_id": "p1", "firstName": "Jane", "lastName": "Doe", "title": "CEO", "company": "Acme",
     "email": "jane@acme.test"},
    {"_id": "p2", "firstName": "Bob", "lastName": "Smith", "title": "CTO", "company": "Globex"},
    {"_id": "p3", "firstName": "Alice", "lastName": "Wong", "title": "Founder", "company": "Initech"},
]

NOTES = [
    {
        "_id": "n1",
        "personId": "p1",
        "rawText": "Coffee with Jane. Meet again tomorrow to go over the pitch deck.",
        "meetings": ["2026-01-13"],
        "actionItems": ["Send Jane the pitch deck"],
        "connections": [{"name": "Bob Smith", "relationship": "introduced me"}],
    },
    {
        "_id": "n2",
        "personId": "p2",
        "rawText": "Bob knows the CEO of Tesla.",
        "networkMentions": [{
            "personName": "Elon Musk",
            "company": "Tesla",
            "title": "CEO",
            "context": "knows",
            "snippet": "Bob knows the CEO of Tesla",
        }],
        "extractedEntities": {"people": ["Elon Musk"], "companies": ["Tesla"], "titles": ["CEO"]},
    },
    {
        "_id": "n3",
        "personId": "p3",
        "rawText": "Alice is hiring a designer.",
        "meetings": ["2026-01-16T15:00:00.000Z"],
        "actionItems": ["Review Alice's design portfolio"],
    },
]


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def persons():
    return [Person.model_validate(p) for p in PERSONS]


@pytest.fixture
def notes():
    return [Note.model_validate(n) for n in NOTES]


@pytest.fixture
def repository(persons, notes):
    return InMemoryRepository(persons, notes)


@pytest.fixture
def tuning():
    return SearchTuning()


@pytest.fixture
def analyzer():
    return QueryAnalyzer(clock=fixed_clock)


@pytest.fixture
def analyze(analyzer):
    return analyzer.analyze


@pytest.fixture
def engine(repository):
    return SearchEngine(repository, clock=fixed_clock)


@pytest.fixture
def client(engine, repository):
    from fastapi.testclient import TestClient

    from rolodex.app import app, get_engine, get_repository

    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_repository] = lambda: repository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
