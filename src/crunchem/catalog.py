# -----------------------------------------------------------------------------
# Catalog: registry aggregator
# Purpose: Concatenate the per-category calculator lists into one ordered,
# validated registry that the selector, runner and API read from.
# - Depends on .types for the record shape and .calculators.* for content.
# - Any malformed record is a startup failure (CatalogError), never skipped.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .types import Calculator, Complexity, FieldType

logger = logging.getLogger(__name__)

# Domain-specific error for a registry that must not be served.
class CatalogError(Exception): pass

ALL_CATEGORIES = "All"

# Display order used by the UI sidebar.
CATEGORIES: Tuple[str, ...] = (
    "Daily Life",
    "Finance",
    "Health & Fitness",
    "Cooking",
    "Sports",
    "Conversion",
    "Mathematics",
    "Physics",
    "Chemistry",
    "Engineering",
    "Algebra",
    "Geometry",
    "Trigonometry",
    "Calculus",
    "Statistics",
    "Computer Science",
)


def _validate_record(c: Calculator) -> None:
    where = f"calculator {c.id!r}" if c.id else "calculator with blank id"
    for attr in ("id", "title", "description", "category", "formula"):
        if not str(getattr(c, attr, "") or "").strip():
            raise CatalogError(f"{where}: missing required field '{attr}'")
    if c.category not in CATEGORIES:
        raise CatalogError(f"{where}: unknown category {c.category!r}")
    if not isinstance(c.complexity, Complexity):
        raise CatalogError(f"{where}: complexity must be one of {[x.value for x in Complexity]}")
    if not callable(c.compute):
        raise CatalogError(f"{where}: compute is not callable")
    if not c.inputs:
        raise CatalogError(f"{where}: inputs must not be empty")
    seen = set()
    for f in c.inputs:
        if f.id in seen:
            raise CatalogError(f"{where}: duplicate input id {f.id!r}")
        seen.add(f.id)
        if f.type == FieldType.SELECT:
            if not f.options:
                raise CatalogError(f"{where}: select input {f.id!r} has no options")
            if f.default_value is not None and str(f.default_value) not in f.option_values():
                raise CatalogError(f"{where}: default for {f.id!r} is not one of its options")
    if any(t != t.lower() for t in c.tags):
        raise CatalogError(f"{where}: tags must be lowercase")


@dataclass(frozen=True)
class Catalog:
    # Every calculator in fixed module order
    calculators: Tuple[Calculator, ...]

    @staticmethod
    def from_modules(modules: Iterable[Sequence[Calculator]]) -> "Catalog":
        """
        Concatenate category modules in the order given and validate the result.
        Raises CatalogError on the first duplicate id or malformed record.
        """
        out: List[Calculator] = []
        ids: Dict[str, Calculator] = {}
        for module in modules:
            for c in module:
                _validate_record(c)
                if c.id in ids:
                    raise CatalogError(f"Duplicate calculator id {c.id!r} "
                                       f"({ids[c.id].category} and {c.category})")
                ids[c.id] = c
                out.append(c)
        return Catalog(calculators=tuple(out))

    def get(self, calculator_id: str) -> Calculator | None:
        return next((c for c in self.calculators if c.id == calculator_id), None)

    def category_counts(self) -> Dict[str, int]:
        counts = {name: 0 for name in CATEGORIES}
        for c in self.calculators:
            counts[c.category] += 1
        return counts

    def list_calculators(self) -> List[Dict[str, Any]]:
        """Flattened, UI-friendly listing (id, title, category, tags, complexity)."""
        return [c.summary() for c in self.calculators]


def category_modules() -> Tuple[Sequence[Calculator], ...]:
    # Fixed aggregation order
    from .calculators.daily_life import DAILY_LIFE
    from .calculators.cooking import COOKING
    from .calculators.sports import SPORTS
    from .calculators.mathematics import MATHEMATICS
    from .calculators.physics import PHYSICS
    return (DAILY_LIFE, COOKING, SPORTS, MATHEMATICS, PHYSICS)


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    catalog = Catalog.from_modules(category_modules())
    logger.info("Loaded %d calculators across %d categories",
                len(catalog.calculators),
                sum(1 for n in catalog.category_counts().values() if n))
    return catalog


def get_all_calculators() -> Tuple[Calculator, ...]:
    return get_catalog().calculators


# Built and validated at import; a bad registry stops the process here.
all_calculators: Tuple[Calculator, ...] = get_all_calculators()
