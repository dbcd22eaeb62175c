"""
Dictionary Seed Service Package

Normalizes the static term catalogs, folds duplicates and upserts the result
in resumable batches. One ``SeedCoordinator`` lives on each Flask app under
``app.extensions['dictionary_seed']``.
"""

from flask import current_app

from ...models.enums import ChildrenPolicy
from .batch_runner import run_batch
from .coordinator import SeedCoordinator
from .errors import DictionarySeedError, MalformedCatalogEntry, PersistenceFailure
from .merger import merge
from .normalizer import normalize, to_slug
from .repository import SqlAlchemyTermRepository, TermChildren, TermRepository
from .types import (
    CodeExample,
    MergedTerm,
    NormalizedTerm,
    RawTermInput,
    SeedBatchResult,
    term_key,
)

EXTENSION_KEY = 'dictionary_seed'


def init_dictionary_seed(app) -> SeedCoordinator:
    """Attach a coordinator built from the app's seed settings."""
    from ...seeders.catalogs import load_merged_catalog

    repository = SqlAlchemyTermRepository(
        children_policy=ChildrenPolicy(app.config.get('SEED_CHILDREN_POLICY', ChildrenPolicy.PRESERVE.value)),
    )
    coordinator = SeedCoordinator(
        repository,
        load_merged_catalog,
        max_items=app.config['SEED_BATCH_SIZE'],
        time_budget_ms=app.config['SEED_TIME_BUDGET_MS'],
    )
    app.extensions[EXTENSION_KEY] = coordinator
    return coordinator


def get_seed_coordinator(app=None) -> SeedCoordinator:
    app = app or current_app._get_current_object()
    coordinator = app.extensions.get(EXTENSION_KEY)
    if coordinator is None:
        coordinator = init_dictionary_seed(app)
    return coordinator


__all__ = [
    'CodeExample',
    'DictionarySeedError',
    'MalformedCatalogEntry',
    'MergedTerm',
    'NormalizedTerm',
    'PersistenceFailure',
    'RawTermInput',
    'SeedBatchResult',
    'SeedCoordinator',
    'SqlAlchemyTermRepository',
    'TermChildren',
    'TermRepository',
    'get_seed_coordinator',
    'init_dictionary_seed',
    'merge',
    'normalize',
    'run_batch',
    'term_key',
    'to_slug',
]
