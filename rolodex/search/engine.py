# Search engine behind POST /search.
#  - analyze the query (keywords + relative date)
#  - scoped: score one person's notes
#  - global: score all persons and all notes, expand the top persons one hop
#  - narrow by query intent, merge + dedup, format
# Holds no per-request state; a single instance serves concurrent requests.

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from rolodex.errors import StorageUnavailable
from rolodex.storage.base import Repository

from .aggregate import merge_results
from .graph import forward_connections
from .intent import Intent, apply_intent_filters, detect_intents
from .query import AnalyzedQuery, QueryAnalyzer
from .scoring import score_notes, score_persons
from .tuning import SearchTuning

logger = logging.getLogger("rolodex.search")


class SearchEngine:
    def __init__(
        self,
        repository: Repository,
        tuning: Optional[SearchTuning] = None,
        clock: Callable[[], datetime] = datetime.now,
        workers: int = 2,
    ):
        self.repository = repository
        self.tuning = tuning or SearchTuning()
        self.analyzer = QueryAnalyzer(clock=clock)
        self.workers = max(1, workers)

    # -------------------------
    # Collaborator reads
    # -------------------------
    def _read(self, fn: Callable, *args):
        """Run a repository read; any failure surfaces as StorageUnavailable."""
        try:
            return fn(*args)
        except StorageUnavailable:
            raise
        except Exception as e:
            raise StorageUnavailable(f"{getattr(fn, '__name__', 'read')} failed: {e}") from e

    # -------------------------
    # Public API
    # -------------------------
    def search(self, query: Optional[str], person_id: Optional[str] = None) -> List[Dict[str, Any]]:
        analyzed = self.analyzer.analyze(query)
        logger.info("processing search query", extra={"fields": {
            "keywords": analyzed.keywords,
            "date_term": analyzed.date_term,
            "target_date": analyzed.target_date,
            "person_id": person_id,
        }})

        if person_id:
            results = self._search_scoped(analyzed, person_id)
        else:
            results = self._search_global(analyzed)

        logger.info("search complete", extra={"fields": {"total_results": len(results)}})
        return results

    def _search_scoped(self, analyzed: AnalyzedQuery, person_id: str) -> List[Dict[str, Any]]:
        notes = self._read(self.repository.find_notes_by_person_id, person_id)
        scored_notes = score_notes(notes, analyzed, self.tuning, scoped=True)

        intents = detect_intents(analyzed.lowered)
        _, scored_notes, _ = apply_intent_filters(intents, [], scored_notes, [])

        people = self._read(self.repository.find_persons_by_ids, [person_id]) if scored_notes else []
        return merge_results(
            [], [], scored_notes,
            {p.id: p for p in people},
            who_is=Intent.WHO_IS in intents,
        )

    def _search_global(self, analyzed: AnalyzedQuery) -> List[Dict[str, Any]]:
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            notes_future = pool.submit(self._read, self.repository.find_all_notes)

            persons = self._read(self.repository.find_all_persons)
            scored_persons = score_persons(persons, analyzed, self.tuning)

            roots = [sp.person for sp in scored_persons[: self.tuning.max_roots]]
            root_notes = (
                self._read(self.repository.find_notes_by_person_ids, [p.id for p in roots])
                if roots else []
            )
            notes = notes_future.result()

        scored_notes = score_notes(notes, analyzed, self.tuning, scoped=False)
        forward = forward_connections(roots, root_notes)
        logger.debug("scored", extra={"fields": {
            "persons": len(scored_persons),
            "notes": len(scored_notes),
            "forward_connections": len(forward),
        }})

        intents = detect_intents(analyzed.lowered)
        scored_persons, scored_notes, forward = apply_intent_filters(
            intents, scored_persons, scored_notes, forward
        )
        return merge_results(
            scored_persons, forward, scored_notes,
            {p.id: p for p in persons},
            who_is=Intent.WHO_IS in intents,
        )
