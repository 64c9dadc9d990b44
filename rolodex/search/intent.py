# Query-intent narrowing, applied after scoring and before aggregation.
# Filters run in a fixed order and each narrows the output of the previous one.

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .types import ForwardConnection, MatchKind, ScoredNote, ScoredPerson


class Intent(str, Enum):
    WHO_IS = "who_is"
    MEETING = "meeting"
    ACTION = "action"


INTENT_MARKERS = (
    (Intent.WHO_IS, ("who is", "who's")),
    (Intent.MEETING, ("meeting",)),
    (Intent.ACTION, ("action", "task", "todo")),
)


def detect_intents(lowered: str) -> List[Intent]:
    return [intent for intent, markers in INTENT_MARKERS if any(m in lowered for m in markers)]


def apply_intent_filters(
    intents: List[Intent],
    persons: List[ScoredPerson],
    notes: List[ScoredNote],
    forward: List[ForwardConnection],
) -> Tuple[List[ScoredPerson], List[ScoredNote], List[ForwardConnection]]:
    for intent in intents:
        if intent is Intent.WHO_IS:
            persons, notes, forward = persons[:1], [], []
        elif intent is Intent.MEETING:
            persons, forward = [], []
            notes = [n for n in notes if n.has(MatchKind.MEETING)]
        elif intent is Intent.ACTION:
            persons, forward = [], []
            notes = [n for n in notes if n.has(MatchKind.ACTION_ITEM)]
    return persons, notes, forward
