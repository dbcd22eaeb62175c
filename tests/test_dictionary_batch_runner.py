import logging

import pytest

from diccionario.services.dictionary_seed import (
    PersistenceFailure,
    RawTermInput,
    normalize,
    run_batch,
)


def _catalog(*terms):
    return [
        normalize(RawTermInput.from_mapping({
            'term': term,
            'translation': term,
            'category': 'backend',
            'description_es': f'el término {term}',
            'example': {'code': f'// {term}'},
        }))
        for term in terms
    ]


class _SteppingClock:
    """Advances by ``step`` seconds every time it is read."""

    def __init__(self, step):
        self.step = step
        self.now = 0.0

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


def test_fresh_store_is_fully_seeded_in_one_batch(memory_repository):
    repo = memory_repository()

    result = run_batch(_catalog('fetch', 'JWT', 'REST'), repo, max_items=10, time_budget_ms=60_000)

    assert result.processed == 3
    assert result.remaining == 0
    assert result.total_missing == 3
    assert result.completed is True
    assert not result.batch_limit_reached
    assert not result.time_budget_reached
    assert repo.upserts == ['fetch', 'JWT', 'REST']
    assert len(repo.stats_rows) == 3


def test_existing_terms_are_skipped_case_insensitively(memory_repository):
    repo = memory_repository(names=['FETCH'])

    result = run_batch(_catalog('fetch', 'JWT'), repo, max_items=10, time_budget_ms=60_000)

    assert repo.upserts == ['JWT']
    assert result.total_missing == 1
    assert result.completed


def test_single_item_batches_make_monotonic_progress(memory_repository):
    catalog = _catalog('a', 'b', 'c', 'd')
    repo = memory_repository()

    results = [run_batch(catalog, repo, max_items=1, time_budget_ms=60_000) for _ in catalog]

    assert [r.processed for r in results] == [1, 1, 1, 1]
    assert [r.remaining for r in results] == [3, 2, 1, 0]
    assert all(r.batch_limit_reached for r in results[:-1])
    assert results[-1].completed
    assert not results[-1].batch_limit_reached


def test_zero_time_budget_processes_nothing(memory_repository):
    repo = memory_repository()

    result = run_batch(_catalog('a', 'b'), repo, max_items=10, time_budget_ms=0)

    assert result.processed == 0
    assert result.time_budget_reached is True
    assert result.remaining == result.total_missing == 2
    assert result.completed is False
    assert repo.upserts == []


def test_time_budget_is_checked_between_items(memory_repository):
    repo = memory_repository()
    # 0.4s per clock read: start, then one read before each item
    clock = _SteppingClock(step=0.4)

    result = run_batch(_catalog('a', 'b', 'c', 'd'), repo, max_items=10, time_budget_ms=1000, clock=clock)

    assert result.processed == 2
    assert result.remaining == 2
    assert result.time_budget_reached
    assert not result.batch_limit_reached


def test_item_cap_wins_when_both_limits_apply(memory_repository):
    repo = memory_repository()

    result = run_batch(_catalog('a', 'b', 'c'), repo, max_items=1, time_budget_ms=60_000)

    assert result.processed == 1
    assert result.batch_limit_reached
    assert not result.time_budget_reached


def test_empty_missing_set_completes_immediately(memory_repository):
    repo = memory_repository(names=['a'])

    result = run_batch(_catalog('a'), repo, max_items=5, time_budget_ms=0)

    assert result.processed == 0
    assert result.completed
    assert not result.time_budget_reached


def test_upsert_failure_aborts_batch(memory_repository):
    repo = memory_repository(fail_upsert_for={'b'})

    with pytest.raises(PersistenceFailure):
        run_batch(_catalog('a', 'b', 'c'), repo, max_items=10, time_budget_ms=60_000)

    assert repo.upserts == ['a']


def test_stats_row_failure_is_logged_and_recorded(memory_repository, caplog):
    repo = memory_repository(fail_stats_for={'b'})

    with caplog.at_level(logging.WARNING, logger='diccionario.services.dictionary_seed.batch_runner'):
        result = run_batch(_catalog('a', 'b', 'c'), repo, max_items=10, time_budget_ms=60_000)

    assert result.processed == 3
    assert result.completed
    assert result.failed_stats == ('b',)
    assert "Stats row for term 'b' not ensured" in caplog.text


def test_include_existing_rewrites_persisted_terms(memory_repository):
    repo = memory_repository(names=['a', 'b'])

    result = run_batch(_catalog('a', 'b'), repo, max_items=10, time_budget_ms=60_000, include_existing=True)

    assert repo.upserts == ['a', 'b']
    assert result.processed == 2
    assert repo.rows['a']['category'] == 'backend'


def test_result_serializes_to_plain_dict(memory_repository):
    result = run_batch(_catalog('a'), memory_repository(), max_items=1, time_budget_ms=60_000)

    assert result.to_dict() == {
        'processed': 1,
        'remaining': 0,
        'total_missing': 1,
        'completed': True,
        'batch_limit_reached': False,
        'time_budget_reached': False,
        'failed_stats': [],
    }
