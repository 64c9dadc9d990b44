# Makes the folder importable as a package.
# Exports the search engine and its building blocks for convenience.

from .engine import SearchEngine
from .query import AnalyzedQuery, QueryAnalyzer
from .tuning import SearchTuning, load_tuning
from .types import FormattedResult, Match, MatchKind

__all__ = [
    "SearchEngine",
    "QueryAnalyzer",
    "AnalyzedQuery",
    "SearchTuning",
    "load_tuning",
    "Match",
    "MatchKind",
    "FormattedResult",
]
