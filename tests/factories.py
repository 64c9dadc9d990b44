# Small builders shared by the test modules.

from datetime import datetime

from rolodex.storage import Note, Person

# Monday
NOW = datetime(2026, 1, 12, 9, 30)


def fixed_clock():
    return NOW


def make_note(**fields):
    """Note with defaults for the fields a test does not care about."""
    data = {"id": "nx", "person_id": "px", "raw_text": ""}
    data.update(fields)
    return Note(**data)


def make_person(id, first, last, title=None, company=None):
    return Person(id=id, first_name=first, last_name=last, title=title, company=company)
