import logging
from typing import List, Optional

from ..services.dictionary_seed import SeedBatchResult, get_seed_coordinator, term_key
from .catalogs import expected_term_keys

logger = logging.getLogger(__name__)


def seed_dictionary(force=False, batch_size=None, time_budget_ms=None, until_complete=False):
    """Seed missing dictionary terms through the app's coordinator.

    With ``until_complete`` the coordinator is called again until the batch
    reports completion or stops making progress.
    """
    coordinator = get_seed_coordinator()
    results: List[Optional[SeedBatchResult]] = []

    result = coordinator.ensure_seeded(force, max_items=batch_size, time_budget_ms=time_budget_ms)
    results.append(result)
    while until_complete and result is not None and not result.completed:
        if result.processed == 0:
            logger.warning("Dictionary seeding made no progress; stopping with %s terms remaining", result.remaining)
            break
        result = coordinator.ensure_seeded(True, max_items=batch_size, time_budget_ms=time_budget_ms)
        results.append(result)
    return results


def refresh_dictionary(batch_size=None, time_budget_ms=None, until_complete=False):
    """Rewrite scalar fields of every catalog term, existing rows included."""
    coordinator = get_seed_coordinator()
    results: List[SeedBatchResult] = []
    offset = 0
    while True:
        result = coordinator.refresh(offset, max_items=batch_size, time_budget_ms=time_budget_ms)
        results.append(result)
        offset += result.processed
        if not until_complete or result.completed or result.processed == 0:
            break
    return results


def dictionary_status(coordinator=None):
    coordinator = coordinator or get_seed_coordinator()
    expected = expected_term_keys()
    persisted = {term_key(name) for name in coordinator.repository.list_term_names()}
    return {
        'expected': len(expected),
        'current': len(persisted),
        'missing': len(expected - persisted),
        'running': coordinator.running,
    }
