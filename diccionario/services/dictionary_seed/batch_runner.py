from __future__ import annotations

import logging
from time import perf_counter
from typing import Callable, List, Sequence

from .repository import TermChildren, TermRepository, scalar_fields
from .types import MergedTerm, SeedBatchResult, term_key

logger = logging.getLogger(__name__)


def run_batch(
    merged: Sequence[MergedTerm],
    repository: TermRepository,
    max_items: int,
    time_budget_ms: int,
    *,
    include_existing: bool = False,
    clock: Callable[[], float] = perf_counter,
) -> SeedBatchResult:
    """Upsert the terms the store does not have yet, within an item cap and a time budget.

    Entries are processed one at a time in catalog order. The item cap and the
    budget are only checked between entries, so an upsert that has started
    always finishes. Upsert failures abort the batch; stats-row failures are
    logged and recorded on the result.
    """
    started = clock()
    if include_existing:
        pending: List[MergedTerm] = list(merged)
    else:
        persisted = {term_key(name) for name in repository.list_term_names()}
        pending = [entry for entry in merged if entry.key not in persisted]

    logger.info(
        "Dictionary batch starting: %s pending of %s catalog terms (max_items=%s, time_budget_ms=%s)",
        len(pending), len(merged), max_items, time_budget_ms,
    )

    processed = 0
    batch_limit_reached = False
    time_budget_reached = False
    failed_stats: List[str] = []

    for entry in pending:
        if processed >= max_items:
            batch_limit_reached = True
            break
        if (clock() - started) * 1000 >= time_budget_ms:
            time_budget_reached = True
            break

        term_id = repository.upsert_term(entry.term, scalar_fields(entry), TermChildren.from_term(entry))
        processed += 1
        try:
            repository.ensure_stats_row(term_id)
        except Exception as exc:
            logger.warning("Stats row for term %r not ensured: %s", entry.term, exc)
            failed_stats.append(entry.term)

    remaining = max(0, len(pending) - processed)
    result = SeedBatchResult(
        processed=processed,
        remaining=remaining,
        total_missing=len(pending),
        completed=remaining == 0,
        batch_limit_reached=batch_limit_reached,
        time_budget_reached=time_budget_reached,
        failed_stats=tuple(failed_stats),
    )
    logger.info(
        "Dictionary batch finished: processed=%s remaining=%s batch_limit=%s time_budget=%s",
        result.processed, result.remaining, result.batch_limit_reached, result.time_budget_reached,
    )
    return result
