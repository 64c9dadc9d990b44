"""
Connection Graph Traverser

One hop out from the top-ranked person hits: the people each root recorded
as a connection, or mentioned by name, in their own notes. Never recurses
past the roots.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from rolodex.storage.models import Note, Person

from .types import ForwardConnection


def forward_connections(roots: Iterable[Person], notes: Iterable[Note]) -> List[ForwardConnection]:
    """
    Args:
        roots: traversal roots, in rank order
        notes: notes belonging to the roots (others are ignored)

    Returns:
        Forward connections in root order, then note id, then item order.
    """
    by_person: Dict[str, List[Note]] = defaultdict(list)
    for note in notes:
        by_person[note.person_id].append(note)

    out: List[ForwardConnection] = []
    for root in roots:
        for note in sorted(by_person.get(root.id, []), key=lambda n: n.id):
            for conn in note.connections:
                if conn.name:
                    out.append(ForwardConnection(
                        answer=conn.name,
                        connector=root,
                        match_reason=conn.relationship or "Connected",
                    ))
            for mention in note.network_mentions:
                if mention.person_name:
                    out.append(ForwardConnection(
                        answer=mention.person_name,
                        connector=root,
                        match_reason=mention.context or "Network Mention",
                        snippet=mention.snippet or None,
                    ))
    return out
