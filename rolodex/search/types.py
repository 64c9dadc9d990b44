# Data models for the search layer.
# Matches and scored results live for a single request and are never persisted.

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from rolodex.storage.models import Connection, NetworkMention, Note, Person


class MatchKind(str, Enum):
    MEETING = "meeting"
    ACTION_ITEM = "actionItem"
    CONNECTION = "connection"
    NETWORK_MENTION = "networkMention"
    ENTITY_MATCH = "entityMatch"
    TEXT_MATCH = "textMatch"


# --- per-kind payloads ---

@dataclass(frozen=True)
class MeetingHit:
    day: date


@dataclass(frozen=True)
class ActionItemHit:
    item: str


@dataclass(frozen=True)
class ConnectionHit:
    connection: Connection


@dataclass(frozen=True)
class MentionHit:
    mention: NetworkMention


@dataclass(frozen=True)
class EntityHit:
    entities: Tuple[str, ...]


@dataclass(frozen=True)
class TextHit:
    keyword: str
    phrase: bool = False


Payload = Union[MeetingHit, ActionItemHit, ConnectionHit, MentionHit, EntityHit, TextHit]


@dataclass
class Match:
    """One piece of evidence that a note answers the query."""
    kind: MatchKind
    note: Note
    payload: Payload
    score: int
    matched_keywords: List[str] = field(default_factory=list)

    @property
    def person_id(self) -> str:
        return self.note.person_id

    def distinguishing(self) -> str:
        """
        Field that tells two matches of the same kind and person apart.

        Chosen per kind (meeting day, action item text, connection name, mention
        snippet, matched keywords) rather than one keyword-first rule, so two
        different action items hit by the same keyword both survive.
        """
        p = self.payload
        if isinstance(p, MeetingHit):
            return p.day.isoformat()
        if isinstance(p, ActionItemHit):
            return p.item.lower()
        if isinstance(p, ConnectionHit):
            return p.connection.name.lower()
        if isinstance(p, MentionHit):
            return (p.mention.snippet or p.mention.person_name or "").lower()
        if isinstance(p, EntityHit):
            return ",".join(self.matched_keywords)
        return p.keyword

    def dedup_key(self) -> Tuple[str, str, str]:
        return (self.kind.value, self.person_id, self.distinguishing())


@dataclass
class ScoredPerson:
    person: Person
    match_score: int
    match_ratio: float
    matched_keywords: List[str] = field(default_factory=list)

    def sort_key(self):
        return (-self.match_ratio, -self.match_score, self.person.id)


@dataclass
class ScoredNote:
    note: Note
    match_score: int
    matches: List[Match] = field(default_factory=list)

    def has(self, kind: MatchKind) -> bool:
        return any(m.kind is kind for m in self.matches)

    def sort_key(self):
        return (-self.match_score, self.note.id)


@dataclass
class ForwardConnection:
    """A person one hop away from a top-ranked search hit."""
    answer: str
    connector: Person
    match_reason: str
    snippet: Optional[str] = None

    def dedup_key(self) -> Tuple[str, str]:
        return (self.answer.lower(), self.connector.full_name)


@dataclass
class FormattedResult:
    type: str
    person: Dict[str, Any]
    answer: str
    connector_name: Optional[str] = None
    match_reason: Optional[str] = None
    snippet: Optional[str] = None
    is_forward_connection: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type, "person": self.person, "answer": self.answer}
        if self.connector_name is not None:
            out["connectorName"] = self.connector_name
        if self.match_reason is not None:
            out["matchReason"] = self.match_reason
        if self.snippet is not None:
            out["snippet"] = self.snippet
        if self.is_forward_connection is not None:
            out["isForwardConnection"] = self.is_forward_connection
        return out
