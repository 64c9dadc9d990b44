# Turns scored persons, forward connections and note matches into the
# result dicts returned by /search.

from __future__ import annotations

import re
from datetime import date

from rolodex.storage.models import Person

from .types import (
    ActionItemHit,
    ConnectionHit,
    EntityHit,
    FormattedResult,
    ForwardConnection,
    Match,
    MatchKind,
    MeetingHit,
    MentionHit,
    TextHit,
)

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
SNIPPET_CHARS = 200

_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")


def long_date(day: date) -> str:
    """'Tuesday, January 13, 2026' regardless of locale."""
    return f"{DAY_NAMES[day.weekday()]}, {MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def sentence_with(text: str, needle: str) -> str:
    """First sentence of `text` containing `needle` (case-insensitive)."""
    for sentence in _SENTENCE_END.split(text):
        if needle in sentence.lower():
            return sentence.strip()
    return text[:SNIPPET_CHARS].strip()


def format_person(person: Person) -> FormattedResult:
    answer = person.full_name
    if person.title and person.company:
        answer += f" - {person.title} at {person.company}"
    elif person.title:
        answer += f" - {person.title}"
    elif person.company:
        answer += f" - {person.company}"
    return FormattedResult(type="personName", person=person.to_wire(), answer=answer)


def format_forward(fc: ForwardConnection) -> FormattedResult:
    return FormattedResult(
        type=MatchKind.NETWORK_MENTION.value,
        person=fc.connector.to_wire(),
        answer=fc.answer,
        connector_name=fc.connector.full_name,
        match_reason=fc.match_reason,
        snippet=fc.snippet,
        is_forward_connection=True,
    )


def format_match(match: Match, person: Person) -> FormattedResult:
    p = match.payload
    result = FormattedResult(type=match.kind.value, person=person.to_wire(), answer="")

    if isinstance(p, MeetingHit):
        result.answer = f"Meet {person.full_name} on {long_date(p.day)}"
    elif isinstance(p, ActionItemHit):
        result.answer = p.item
    elif isinstance(p, ConnectionHit):
        result.answer = f"{p.connection.name}: {p.connection.relationship}"
        result.connector_name = person.full_name
        result.match_reason = p.connection.relationship or "Connected"
    elif isinstance(p, MentionHit):
        m = p.mention
        result.answer = m.person_name or m.company or m.title or ""
        result.connector_name = person.full_name
        result.match_reason = m.context or "Network Mention"
        result.snippet = m.snippet or None
    elif isinstance(p, EntityHit):
        result.answer = ", ".join(p.entities)
        result.connector_name = person.full_name
        result.match_reason = "Mentioned in notes"
    elif isinstance(p, TextHit):
        sentence = sentence_with(match.note.raw_text, p.keyword)
        result.answer = sentence
        result.snippet = sentence
    else:
        raise TypeError(f"Unhandled match payload: {type(p).__name__}")

    return result
