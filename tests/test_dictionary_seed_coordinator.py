import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from diccionario.services.dictionary_seed import (
    PersistenceFailure,
    RawTermInput,
    SeedBatchResult,
    SeedCoordinator,
    normalize,
)


def _catalog(*terms):
    return [
        normalize(RawTermInput.from_mapping({
            'term': term,
            'translation': term,
            'category': 'frontend',
            'description_es': f'el término {term}',
            'example': {'code': f'{term}()'},
        }))
        for term in terms
    ]


def test_fresh_store_seeds_single_term(memory_repository):
    repo = memory_repository()
    coordinator = SeedCoordinator(repo, lambda: _catalog('fetch'), max_items=200, time_budget_ms=7000)

    result = coordinator.ensure_seeded()

    assert result == SeedBatchResult(
        processed=1,
        remaining=0,
        total_missing=1,
        completed=True,
        batch_limit_reached=False,
        time_budget_reached=False,
    )
    assert repo.upserts == ['fetch']
    children = repo.children['fetch']
    assert len(children.use_cases) == 3
    assert len(children.faqs) == 1
    assert len(children.exercises) == 1


def test_full_store_short_circuits_without_upserts(memory_repository):
    repo = memory_repository(names=['fetch', 'grid'])
    coordinator = SeedCoordinator(repo, lambda: _catalog('fetch', 'grid'), max_items=200, time_budget_ms=7000)

    assert coordinator.ensure_seeded() is None
    assert repo.upserts == []


def test_force_runs_batch_even_when_counts_match(memory_repository):
    # Counts match but the stored names differ from the catalog
    repo = memory_repository(names=['legacy'])
    coordinator = SeedCoordinator(repo, lambda: _catalog('fetch'), max_items=200, time_budget_ms=7000)

    assert coordinator.ensure_seeded() is None
    result = coordinator.ensure_seeded(force=True)

    assert result.processed == 1
    assert repo.upserts == ['fetch']


def test_per_call_overrides_apply_only_to_that_call(memory_repository):
    repo = memory_repository()
    coordinator = SeedCoordinator(repo, lambda: _catalog('a', 'b', 'c'), max_items=200, time_budget_ms=7000)

    first = coordinator.ensure_seeded(max_items=1)
    second = coordinator.ensure_seeded()

    assert first.processed == 1 and first.batch_limit_reached
    assert second.processed == 2 and second.completed
    assert coordinator.max_items == 200


def test_catalog_is_loaded_once(memory_repository):
    calls = []

    def loader():
        calls.append(1)
        return _catalog('fetch')

    coordinator = SeedCoordinator(memory_repository(), loader, max_items=10, time_budget_ms=7000)
    coordinator.ensure_seeded()
    coordinator.ensure_seeded()

    assert coordinator.expected_count == 1
    assert len(calls) == 1


class _BlockingRepository:
    """Term store whose first upsert blocks until released."""

    def __init__(self, inner):
        self.inner = inner
        self.entered = threading.Event()
        self.release = threading.Event()
        self.upsert_calls = 0
        self._lock = threading.Lock()

    def count_terms(self):
        return self.inner.count_terms()

    def list_term_names(self):
        return self.inner.list_term_names()

    def upsert_term(self, key, fields, children=None):
        with self._lock:
            self.upsert_calls += 1
        self.entered.set()
        assert self.release.wait(timeout=5)
        return self.inner.upsert_term(key, fields, children)

    def ensure_stats_row(self, term_id):
        self.inner.ensure_stats_row(term_id)


def test_concurrent_callers_share_one_batch(memory_repository):
    repo = _BlockingRepository(memory_repository())
    coordinator = SeedCoordinator(repo, lambda: _catalog('fetch'), max_items=10, time_budget_ms=60_000)

    with ThreadPoolExecutor(max_workers=3) as pool:
        owner = pool.submit(coordinator.ensure_seeded)
        assert repo.entered.wait(timeout=5)
        assert coordinator.running
        joiners = [pool.submit(coordinator.ensure_seeded) for _ in range(2)]
        repo.release.set()
        results = [owner.result(timeout=5)] + [f.result(timeout=5) for f in joiners]

    assert repo.upsert_calls == 1
    assert results[0].processed == 1
    # A joiner that arrives after the batch finished sees a full store instead
    assert all(r is None or r == results[0] for r in results[1:])
    assert not coordinator.running


def test_failure_propagates_and_clears_running_state(memory_repository):
    repo = memory_repository(fail_upsert_for={'fetch'})
    coordinator = SeedCoordinator(repo, lambda: _catalog('fetch'), max_items=10, time_budget_ms=7000)

    with pytest.raises(PersistenceFailure):
        coordinator.ensure_seeded()

    assert not coordinator.running

    repo._fail_upsert_for.clear()
    result = coordinator.ensure_seeded()
    assert result.completed


def test_refresh_rewrites_existing_rows_from_offset(memory_repository):
    repo = memory_repository(names=['a', 'b', 'c'])
    coordinator = SeedCoordinator(repo, lambda: _catalog('a', 'b', 'c'), max_items=200, time_budget_ms=7000)

    result = coordinator.refresh(1)

    assert result.processed == 2 and result.completed
    assert repo.upserts == ['b', 'c']
    assert not coordinator.running


def test_refresh_waits_for_inflight_seed_then_runs_its_own_batch(memory_repository):
    repo = _BlockingRepository(memory_repository())
    coordinator = SeedCoordinator(repo, lambda: _catalog('fetch', 'grid'), max_items=10, time_budget_ms=60_000)

    with ThreadPoolExecutor(max_workers=2) as pool:
        seed = pool.submit(coordinator.ensure_seeded)
        assert repo.entered.wait(timeout=5)
        refresh = pool.submit(coordinator.refresh)
        time.sleep(0.1)
        # The refresh is parked behind the seed and has not touched the store
        assert repo.upsert_calls == 1
        assert not refresh.done()
        repo.release.set()
        seeded = seed.result(timeout=5)
        refreshed = refresh.result(timeout=5)

    assert seeded.processed == 2
    assert refreshed.processed == 2
    assert repo.inner.upserts == ['fetch', 'grid', 'fetch', 'grid']
    assert not coordinator.running


def test_seed_during_refresh_waits_instead_of_joining(memory_repository):
    repo = _BlockingRepository(memory_repository(names=['fetch']))
    coordinator = SeedCoordinator(repo, lambda: _catalog('fetch'), max_items=10, time_budget_ms=60_000)

    with ThreadPoolExecutor(max_workers=2) as pool:
        refresh = pool.submit(coordinator.refresh)
        assert repo.entered.wait(timeout=5)
        seed = pool.submit(coordinator.ensure_seeded)
        repo.release.set()
        refreshed = refresh.result(timeout=5)
        seeded = seed.result(timeout=5)

    assert refreshed.processed == 1
    # The store is full once the refresh finishes, so the seed short-circuits
    assert seeded is None
    assert repo.upsert_calls == 1
