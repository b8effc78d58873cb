"""Pattern classifier: linked (self-referential) > nested > simple.

Instance counts and nesting depths are synthetic sizing numbers for the grid
mapper, drawn from a seedable numpy Generator so a given seed always yields
the same values.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from structgrid.core.records import Category, ClassifiedStructure, StructureRecord

DEFAULT_SEED = 7

# Half-open [low, high) ranges per category: (instance_count, nesting_depth)
CATEGORY_RANGES: dict[Category, tuple[tuple[int, int], tuple[int, int]]] = {
    Category.LINKED: ((5, 55), (1, 6)),
    Category.NESTED: ((3, 33), (2, 9)),
    Category.SIMPLE: ((1, 11), (1, 2)),
}


def is_linked(record: StructureRecord) -> bool:
    """A pointer member whose type names the enclosing structure."""
    return any(m.is_pointer and record.name in m.declared_type for m in record.members)


def is_nested(record: StructureRecord, all_records: Iterable[StructureRecord]) -> bool:
    """A member whose type names some other known structure."""
    others = {r.name for r in all_records if r.name != record.name}
    return any(name in m.declared_type for m in record.members for name in others)


def categorize(record: StructureRecord, all_records: Sequence[StructureRecord]) -> Category:
    if is_linked(record):
        return Category.LINKED
    if is_nested(record, all_records):
        return Category.NESTED
    return Category.SIMPLE


def classify(
    records: Sequence[StructureRecord],
    seed: int | None = DEFAULT_SEED,
    ranges: dict[Category, tuple[tuple[int, int], tuple[int, int]]] | None = None,
) -> list[ClassifiedStructure]:
    """Label every record and attach its synthetic instance count and depth.

    One generator is used for the whole call, so results are stable for a
    given (records, seed) pair. ``seed=None`` draws fresh entropy.
    """
    rng = np.random.default_rng(seed)
    ranges = ranges or CATEGORY_RANGES
    classified: list[ClassifiedStructure] = []

    for record in records:
        category = categorize(record, records)
        (count_lo, count_hi), (depth_lo, depth_hi) = ranges[category]
        classified.append(
            ClassifiedStructure(
                record=record,
                category=category,
                instance_count=int(rng.integers(count_lo, count_hi)),
                nesting_depth=int(rng.integers(depth_lo, depth_hi)),
            )
        )

    return classified


def select_structures(
    classified: Sequence[ClassifiedStructure],
    names: Iterable[str] | None,
) -> list[ClassifiedStructure]:
    """Keep only the named structures; no names (or None) keeps everything."""
    wanted = set(names or ())
    if not wanted:
        return list(classified)
    return [c for c in classified if c.name in wanted]
