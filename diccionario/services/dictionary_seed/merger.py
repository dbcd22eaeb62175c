from __future__ import annotations

import dataclasses
from functools import reduce
from typing import Dict, Iterable, List, Sequence, Tuple

from .types import MergedTerm, NormalizedTerm, term_key


def merge(catalogs: Sequence[Sequence[NormalizedTerm]]) -> List[MergedTerm]:
    """Fold normalized catalogs into one record per case-insensitive term.

    Later catalogs win on scalar text, aliases and tags are unioned, examples
    are replaced only by a non-empty incoming set and child collections are
    concatenated. Output keeps first-appearance order.
    """
    records = (record for catalog in catalogs for record in catalog)
    folded = reduce(_fold, records, {})
    return list(folded.values())


def _fold(acc: Dict[str, MergedTerm], record: NormalizedTerm) -> Dict[str, MergedTerm]:
    key = term_key(record.term)
    if not key:
        return acc
    existing = acc.get(key)
    merged = _merge_pair(existing, record) if existing is not None else dataclasses.replace(
        record,
        aliases=_union(record.aliases),
        tags=_union(record.tags),
    )
    return {**acc, key: merged}


def _merge_pair(existing: MergedTerm, incoming: NormalizedTerm) -> MergedTerm:
    return dataclasses.replace(
        incoming,
        slug=existing.slug or incoming.slug,
        aliases=_union(existing.aliases, incoming.aliases),
        tags=_union(existing.tags, incoming.tags),
        examples=incoming.examples or existing.examples,
        variants=existing.variants + incoming.variants,
        use_cases=existing.use_cases + incoming.use_cases,
        faqs=existing.faqs + incoming.faqs,
        exercises=existing.exercises + incoming.exercises,
    )


def _union(*groups: Iterable[str]) -> Tuple[str, ...]:
    seen = {}
    for group in groups:
        for value in group or ():
            if value and value not in seen:
                seen[value] = None
    return tuple(seen)
