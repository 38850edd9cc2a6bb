# -----------------------------------------------------------------------------
# Calculator Selector (query layer)
# Purpose: Answer "which calculators match X" over the registry: exact
# category filtering and free-text search ranked by where the query matched.
# Pure functions; the registry is never modified.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from .catalog import ALL_CATEGORIES, get_all_calculators
from .types import Calculator

# Relevance weights. A title hit (10) outranks every non-title hit combined (8).
TITLE_WEIGHT = 10.0
TAG_WEIGHT = 4.0
DESCRIPTION_WEIGHT = 2.0
CATEGORY_WEIGHT = 1.0
FORMULA_WEIGHT = 1.0

@dataclass
class Scored:
    # Match breakdown for one calculator (used for ranking and explain output).
    calculator_id: str
    total: float             # final score used for ranking
    title_hit: bool
    tag_hits: int            # number of tags containing the query
    description_hit: bool
    category_hit: bool
    formula_hit: bool
    position: int            # registry index, the tie-breaker

    @property
    def matched(self) -> bool:
        return self.total > 0


def _registry(calculators: Sequence[Calculator] | None) -> Sequence[Calculator]:
    return get_all_calculators() if calculators is None else calculators


def _score(c: Calculator, needle: str, position: int) -> Scored:
    # ---- Case-insensitive substring hits per field
    title_hit = needle in c.title.lower()
    tag_hits = sum(1 for t in c.tags if needle in t.lower())
    description_hit = needle in c.description.lower()
    category_hit = needle in c.category.lower()
    formula_hit = needle in c.formula.lower()

    # ---- Total: a field counts once regardless of how many tags hit
    total = (TITLE_WEIGHT * title_hit + TAG_WEIGHT * (tag_hits > 0)
             + DESCRIPTION_WEIGHT * description_hit + CATEGORY_WEIGHT * category_hit
             + FORMULA_WEIGHT * formula_hit)
    return Scored(c.id, total, title_hit, tag_hits, description_hit,
                  category_hit, formula_hit, position)


def score_calculators(query: str, calculators: Sequence[Calculator] | None = None) -> List[Scored]:
    """
    Score every matching calculator, best first. Ties keep registry order.
    A blank query scores nothing (callers treat it as "match everything").
    """
    needle = (query or "").strip().lower()
    if not needle:
        return []
    scored = [_score(c, needle, i) for i, c in enumerate(_registry(calculators))]
    hits = [s for s in scored if s.matched]
    # list.sort is stable, so equal totals stay in registry order
    hits.sort(key=lambda s: s.total, reverse=True)
    return hits


def search_calculators(query: str, calculators: Sequence[Calculator] | None = None) -> List[Calculator]:
    registry = _registry(calculators)
    if not (query or "").strip():
        return list(registry)
    return [registry[s.position] for s in score_calculators(query, registry)]


def get_calculators_by_category(category: str, calculators: Sequence[Calculator] | None = None) -> List[Calculator]:
    registry = _registry(calculators)
    if category == ALL_CATEGORIES:
        return list(registry)
    return [c for c in registry if c.category == category]
