"""
Entity Scorers

Person scorer: keywords vs. "first last company title", plus name/title/company
boosts. Note scorer: keywords vs. a note's raw text, meetings, action items,
connections, network mentions and extracted entities.

Note scoring is two steps: collect every candidate match, then filter the
candidates (mention coverage gate, mention-over-text dedup). Each step is a
plain function of its inputs.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from rolodex.storage.models import Note, Person

from .format import long_date
from .fuzzy import is_match
from .query import AnalyzedQuery
from .tuning import SearchTuning
from .types import (
    ActionItemHit,
    ConnectionHit,
    EntityHit,
    Match,
    MatchKind,
    MeetingHit,
    MentionHit,
    ScoredNote,
    ScoredPerson,
    TextHit,
)


# -------------------------
# Persons
# -------------------------
def score_person(person: Person, query: AnalyzedQuery, tuning: SearchTuning) -> ScoredPerson:
    first = person.first_name.lower()
    last = person.last_name.lower()
    company = (person.company or "").lower()
    title = (person.title or "").lower()
    composite = " ".join(part for part in (first, last, company, title) if part)

    keywords = query.keywords
    matched = [kw for kw in keywords if is_match(composite, kw)]
    count = len(matched)

    # boosts per non-stop query word, scored separately from the ratio
    for word in keywords:
        if is_match(first, word) or is_match(last, word):
            count += tuning.name_boost
        if is_match(title, word):
            count += tuning.title_boost
        if is_match(company, word):
            count += tuning.company_boost

    ratio = len(matched) / len(keywords) if keywords else 0.0
    return ScoredPerson(person=person, match_score=count, match_ratio=ratio, matched_keywords=matched)


def person_included(scored: ScoredPerson, query: AnalyzedQuery, tuning: SearchTuning) -> bool:
    if scored.match_ratio > tuning.min_match_ratio and scored.matched_keywords:
        return True
    return len(query.keywords) == 1 and scored.match_score >= tuning.single_keyword_min_count


def score_persons(persons: Iterable[Person], query: AnalyzedQuery, tuning: SearchTuning) -> List[ScoredPerson]:
    scored = (score_person(p, query, tuning) for p in persons)
    kept = [s for s in scored if person_included(s, query, tuning)]
    return sorted(kept, key=ScoredPerson.sort_key)


# -------------------------
# Notes: candidate collection
# -------------------------
def _text_matches(note: Note, query: AnalyzedQuery, tuning: SearchTuning, scoped: bool) -> Tuple[int, List[Match]]:
    text = note.raw_text.lower()
    score = 0
    matches: List[Match] = []

    if not scoped and query.lowered in text:
        score += tuning.phrase_score
        matches.append(Match(MatchKind.TEXT_MATCH, note, TextHit(query.lowered, phrase=True),
                             tuning.phrase_score, list(query.keywords)))

    for kw in query.keywords:
        if kw in text:
            score += tuning.keyword_text_score
            if not matches:
                matches.append(Match(MatchKind.TEXT_MATCH, note, TextHit(kw), tuning.keyword_text_score, [kw]))
    return score, matches


def _meeting_matches(note: Note, query: AnalyzedQuery, tuning: SearchTuning) -> Tuple[int, List[Match]]:
    score = 0
    matches: List[Match] = []
    for day in note.meetings:
        if query.target_date is not None:
            if day == query.target_date:
                score += tuning.meeting_date_score
                matches.append(Match(MatchKind.MEETING, note, MeetingHit(day), tuning.meeting_date_score))
            continue

        # "tuesday, january 13, 2026": weekday names are covered by the substring test
        long_form = long_date(day).lower()
        for kw in query.keywords:
            if kw in long_form:
                score += tuning.meeting_keyword_score
                matches.append(Match(MatchKind.MEETING, note, MeetingHit(day), tuning.meeting_keyword_score, [kw]))
    return score, matches


def _action_item_matches(note: Note, query: AnalyzedQuery, tuning: SearchTuning) -> Tuple[int, List[Match]]:
    score = 0
    matches: List[Match] = []
    for item in note.action_items:
        item_lower = item.lower()
        for kw in query.keywords:
            if kw in item_lower:
                score += tuning.action_item_score
                matches.append(Match(MatchKind.ACTION_ITEM, note, ActionItemHit(item), tuning.action_item_score, [kw]))
    return score, matches


def _connection_matches(note: Note, query: AnalyzedQuery, tuning: SearchTuning) -> Tuple[int, List[Match]]:
    score = 0
    matches: List[Match] = []
    for conn in note.connections:
        conn_str = f"{conn.name} {conn.relationship}".lower()
        for kw in query.keywords:
            if kw in conn_str:
                score += tuning.connection_score
                matches.append(Match(MatchKind.CONNECTION, note, ConnectionHit(conn), tuning.connection_score, [kw]))
    return score, matches


def _mention_matches(note: Note, query: AnalyzedQuery, tuning: SearchTuning) -> Tuple[int, List[Match]]:
    score = 0
    matches: List[Match] = []
    for mention in note.network_mentions:
        name = (mention.person_name or "").lower()
        company = (mention.company or "").lower()
        title = (mention.title or "").lower()
        context = (mention.context or "").lower()
        composite = " ".join(part for part in (name, company, title, context) if part)
        name_words = name.split()

        mention_score = 0
        hit: List[str] = []
        for kw in query.keywords:
            kw_score = 0
            if kw in composite:
                kw_score += tuning.mention_keyword_score
            if company and kw in company:
                kw_score += tuning.mention_company_boost
            if title and kw in title:
                kw_score += tuning.mention_title_boost
            if kw in name_words:
                kw_score += tuning.mention_name_word_boost
            elif name and kw in name:
                kw_score += tuning.mention_name_substring_boost
            if kw_score:
                mention_score += kw_score
                hit.append(kw)

        if mention_score:
            total = mention_score + tuning.mention_evidence_bonus
            score += total
            matches.append(Match(MatchKind.NETWORK_MENTION, note, MentionHit(mention), total, hit))
    return score, matches


def _entity_matches(note: Note, query: AnalyzedQuery, tuning: SearchTuning) -> Tuple[int, List[Match]]:
    ents = note.extracted_entities
    values = [*ents.companies, *ents.titles, *ents.people]
    lowered = [v.lower() for v in values]

    hit_keywords: List[str] = []
    hit_values: List[str] = []
    for kw in query.keywords:
        found = [v for v, low in zip(values, lowered) if kw in low]
        if found:
            hit_keywords.append(kw)
            hit_values.extend(v for v in found if v not in hit_values)

    if not hit_keywords:
        return 0, []
    score = tuning.entity_score * len(hit_keywords)
    return score, [Match(MatchKind.ENTITY_MATCH, note, EntityHit(tuple(hit_values)), score, hit_keywords)]


def collect_note_matches(note: Note, query: AnalyzedQuery, tuning: SearchTuning, scoped: bool) -> Tuple[int, List[Match]]:
    total = 0
    matches: List[Match] = []
    for score, found in (
        _text_matches(note, query, tuning, scoped),
        _meeting_matches(note, query, tuning),
        _action_item_matches(note, query, tuning),
        _connection_matches(note, query, tuning),
        _mention_matches(note, query, tuning),
        _entity_matches(note, query, tuning),
    ):
        total += score
        matches.extend(found)
    return total, matches


# -------------------------
# Notes: filtering
# -------------------------
def mention_coverage_ok(match: Match, query: AnalyzedQuery, threshold: float) -> bool:
    if len(query.keywords) <= 1:
        return True
    coverage = len(match.matched_keywords) / len(query.keywords)
    if coverage > threshold:
        return True
    snippet = match.payload.mention.snippet if isinstance(match.payload, MentionHit) else None
    return bool(snippet) and query.lowered in snippet.lower()


def filter_note_matches(matches: List[Match], query: AnalyzedQuery, tuning: SearchTuning, scoped: bool) -> List[Match]:
    threshold = tuning.coverage_scoped if scoped else tuning.coverage_global
    kept = [
        m for m in matches
        if m.kind is not MatchKind.NETWORK_MENTION or mention_coverage_ok(m, query, threshold)
    ]
    # structured mention evidence supersedes raw-text evidence
    if any(m.kind is MatchKind.NETWORK_MENTION for m in kept):
        kept = [m for m in kept if m.kind is not MatchKind.TEXT_MATCH]
    return kept


def score_note(note: Note, query: AnalyzedQuery, tuning: SearchTuning, scoped: bool) -> Optional[ScoredNote]:
    total, candidates = collect_note_matches(note, query, tuning, scoped)
    matches = filter_note_matches(candidates, query, tuning, scoped)
    if total <= 0 or not matches:
        return None
    return ScoredNote(note=note, match_score=total, matches=matches)


def score_notes(notes: Iterable[Note], query: AnalyzedQuery, tuning: SearchTuning, scoped: bool) -> List[ScoredNote]:
    scored = [s for s in (score_note(n, query, tuning, scoped) for n in notes) if s is not None]
    return sorted(scored, key=ScoredNote.sort_key)
