# Loads search tuning (thresholds + weights) from tuning.yaml next to this file,
# or from an explicit path (SEARCH_TUNING_PATH).

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Optional

import yaml

DEFAULT_TUNING_PATH = os.path.join(os.path.dirname(__file__), "tuning.yaml")


@dataclass(frozen=True)
class SearchTuning:
    # person scorer
    min_match_ratio: float = 0.7
    single_keyword_min_count: int = 2
    name_boost: int = 2
    title_boost: int = 1
    company_boost: int = 1

    # note scorer
    phrase_score: int = 5
    keyword_text_score: int = 1
    meeting_date_score: int = 5
    meeting_keyword_score: int = 2
    action_item_score: int = 1
    connection_score: int = 2
    entity_score: int = 5

    # network mentions
    mention_keyword_score: int = 1
    mention_company_boost: int = 3
    mention_title_boost: int = 2
    mention_name_word_boost: int = 5
    mention_name_substring_boost: int = 1
    mention_evidence_bonus: int = 10
    coverage_global: float = 0.7
    coverage_scoped: float = 0.5

    # graph traversal
    max_roots: int = 3


# yaml section -> prefix used on the dataclass field
_SECTIONS = {"person": "", "note": "", "mention": "mention_", "graph": ""}
_RENAMES = {"mention_coverage_global": "coverage_global", "mention_coverage_scoped": "coverage_scoped"}


def load_tuning(path: Optional[str] = None) -> SearchTuning:
    """Read tuning YAML; unknown keys are rejected so typos do not go unnoticed."""
    path = path or DEFAULT_TUNING_PATH
    if not os.path.exists(path):
        raise FileNotFoundError(f"Search tuning file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    known = {f.name for f in fields(SearchTuning)}
    values = {}
    for section, prefix in _SECTIONS.items():
        for key, value in (data.get(section) or {}).items():
            name = _RENAMES.get(prefix + key, prefix + key)
            if name not in known:
                raise KeyError(f"Unknown tuning key '{section}.{key}' in {path}")
            values[name] = value
    return SearchTuning(**values)
