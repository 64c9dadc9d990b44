# Keyword-vs-field matching: substring containment, with a bounded
# Levenshtein tolerance for terms of 4+ characters.

from __future__ import annotations

from typing import Optional

from rapidfuzz.distance import Levenshtein

MIN_FUZZY_LENGTH = 4


def is_match(text: Optional[str], term: str, threshold: int = 2) -> bool:
    """
    True if `term` occurs in `text`, or (for terms >= 4 chars) the whole of
    `text` is within `threshold` edits of `term`.

    Both sides are compared as given; callers lower-case them and should pass
    short fields (a name, a title), not whole paragraphs.
    """
    if not text or not term:
        return False
    if term in text:
        return True
    if len(term) < MIN_FUZZY_LENGTH:
        return False
    return Levenshtein.distance(text, term, score_cutoff=threshold) <= threshold
