# Merge person, forward-connection and note results into one ordered,
# de-duplicated list of result dicts.
# Order: persons, forward connections, note matches (note score desc, then
# collection order). First occurrence of a dedup key wins.

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Set, Tuple

from rolodex.storage.models import Person

from .format import format_forward, format_match, format_person
from .types import FormattedResult, ForwardConnection, ScoredNote, ScoredPerson

logger = logging.getLogger("rolodex.search")


def merge_results(
    persons: List[ScoredPerson],
    forward: List[ForwardConnection],
    notes: List[ScoredNote],
    people_by_id: Mapping[str, Person],
    who_is: bool = False,
) -> List[Dict[str, Any]]:
    results: List[FormattedResult] = [format_person(sp.person) for sp in persons]

    seen_forward: Set[Tuple[str, str]] = set()
    for fc in forward:
        key = fc.dedup_key()
        if key in seen_forward:
            continue
        seen_forward.add(key)
        results.append(format_forward(fc))

    seen: Set[Tuple[str, str, str]] = set()
    for scored in notes:
        for match in scored.matches:
            key = match.dedup_key()
            if key in seen:
                continue
            person = people_by_id.get(match.person_id)
            if person is None:
                logger.warning("person not found for note", extra={"fields": {
                    "person_id": match.person_id, "note_id": match.note.id}})
                continue
            seen.add(key)
            results.append(format_match(match, person))

    # final guard: "who is" answers with the top person and nothing else
    if who_is:
        results = [r for r in results if r.type == "personName"][:1]

    return [r.to_dict() for r in results]
