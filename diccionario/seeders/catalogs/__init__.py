"""Static term catalogs, in merge order (later catalogs win on conflicts)."""

from functools import lru_cache
from typing import List, Sequence, Tuple

from ...services.dictionary_seed.merger import merge
from ...services.dictionary_seed.normalizer import normalize
from ...services.dictionary_seed.types import MergedTerm, RawTermInput, term_key
from .css_terms import CSS_TERMS, css_entry_to_raw
from .curated_terms import CURATED_TERMS


def raw_catalogs() -> Tuple[Tuple[RawTermInput, ...], ...]:
    return (
        tuple(RawTermInput.from_mapping(entry) for entry in CURATED_TERMS),
        tuple(RawTermInput.from_mapping(css_entry_to_raw(entry)) for entry in CSS_TERMS),
    )


def normalize_catalogs(catalogs: Sequence[Sequence[RawTermInput]]) -> List[List]:
    return [[normalize(raw) for raw in catalog] for catalog in catalogs]


@lru_cache(maxsize=1)
def _merged_catalog() -> Tuple[MergedTerm, ...]:
    return tuple(merge(normalize_catalogs(raw_catalogs())))


def load_merged_catalog() -> List[MergedTerm]:
    """Normalized, deduplicated dictionary built from every static catalog."""
    return list(_merged_catalog())


def expected_term_keys() -> frozenset:
    keys = {term_key(raw.term) for catalog in raw_catalogs() for raw in catalog}
    keys.discard('')
    return frozenset(keys)


__all__ = [
    'CSS_TERMS',
    'CURATED_TERMS',
    'css_entry_to_raw',
    'expected_term_keys',
    'load_merged_catalog',
    'normalize_catalogs',
    'raw_catalogs',
]
