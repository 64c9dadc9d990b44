"""
Query Analyzer

Turns a raw search string into keywords and an optional target date.

- lower-cases and trims the query (blank -> InvalidQuery)
- strips a fixed punctuation set, splits on whitespace
- drops stop-words (articles, pronouns, generic relationship nouns,
  query verbs, and the relative date terms themselves)
- resolves the first relative date term ("tomorrow", "friday", ...)
  against an injected clock
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Callable, FrozenSet, List, Optional, Sequence

from rolodex.errors import InvalidQuery

PUNCTUATION = "?!.,;:\"()[]{}"
_PUNCT_RE = re.compile("[" + re.escape(PUNCTUATION) + "]")
# phone keyboards send typographic apostrophes ("who’s")
_QUOTES = str.maketrans({"\u2019": "'", "\u2018": "'"})

# Sunday-first, matching the weekday index used for week resolution.
WEEKDAYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")

# Lookup order matters: the first term present in the query wins.
DATE_TERMS = ("today", "tomorrow", "yesterday") + WEEKDAYS

STOP_WORDS = frozenset({
    # articles, prepositions, glue
    "a", "an", "the", "at", "in", "on", "of", "for", "to", "with", "from",
    "about", "and", "or", "any", "all", "is", "are", "was", "were", "be",
    "do", "does", "did", "have", "has", "had", "what", "when", "where",
    "which", "who", "whom", "who's", "whos", "what's", "how",
    # pronouns
    "i", "me", "my", "mine", "we", "us", "our", "you", "your", "he", "him",
    "his", "she", "her", "they", "them", "their", "it", "its",
    # generic relationship nouns
    "connection", "connections", "connected", "person", "people", "someone",
    "somebody", "anyone", "contact", "contacts",
    # query verbs
    "find", "show", "list", "get", "give", "tell", "search", "look",
    # relative date terms
    *DATE_TERMS,
})


@dataclass
class AnalyzedQuery:
    raw: str
    lowered: str
    words: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    target_date: Optional[date] = None
    date_term: Optional[str] = None


def _weekday_index(day: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def resolve_date_term(term: str, today: date) -> date:
    if term == "today":
        return today
    if term == "tomorrow":
        return today + timedelta(days=1)
    if term == "yesterday":
        return today - timedelta(days=1)
    # weekday names land inside the current Sunday-started week
    return today + timedelta(days=WEEKDAYS.index(term) - _weekday_index(today))


class QueryAnalyzer:
    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        stop_words: FrozenSet[str] = STOP_WORDS,
        date_terms: Sequence[str] = DATE_TERMS,
    ):
        self.clock = clock
        self.stop_words = frozenset(stop_words)
        self.date_terms = tuple(date_terms)

    def tokenize(self, lowered: str) -> List[str]:
        return [w for w in _PUNCT_RE.sub(" ", lowered).split() if w]

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def find_date(self, lowered: str):
        for term in self.date_terms:
            if term in lowered:
                return term, resolve_date_term(term, self.clock().date())
        return None, None

    def analyze(self, query: Optional[str]) -> AnalyzedQuery:
        if query is None or not query.strip():
            raise InvalidQuery("Query is required")

        lowered = query.strip().lower().translate(_QUOTES)
        words = self.tokenize(lowered)
        keywords = [w for w in words if not self.is_stop_word(w)]
        term, target = self.find_date(lowered)

        return AnalyzedQuery(
            raw=query,
            lowered=lowered,
            words=words,
            keywords=keywords,
            target_date=target,
            date_term=term,
        )
