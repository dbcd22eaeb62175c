from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, wait
from typing import Callable, List, Optional, Sequence

from .batch_runner import run_batch
from .repository import TermRepository
from .types import MergedTerm, SeedBatchResult

logger = logging.getLogger(__name__)


class SeedCoordinator:
    """Run at most one seeding batch at a time and skip work once the store is full.

    Seed callers that arrive while a seed is running wait on the same future and
    receive its result (or its exception) instead of starting a second batch.
    Refreshes share the same in-flight slot but always run their own batch once
    the slot is free.
    """

    def __init__(
        self,
        repository: TermRepository,
        catalog_loader: Callable[[], Sequence[MergedTerm]],
        max_items: int,
        time_budget_ms: int,
        *,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.repository = repository
        self.max_items = max_items
        self.time_budget_ms = time_budget_ms
        self._catalog_loader = catalog_loader
        self._catalog: Optional[List[MergedTerm]] = None
        self._clock = clock
        self._lock = threading.Lock()
        self._inflight: Optional[Future] = None
        self._inflight_joinable = False

    @property
    def catalog(self) -> List[MergedTerm]:
        if self._catalog is None:
            self._catalog = list(self._catalog_loader())
        return self._catalog

    @property
    def expected_count(self) -> int:
        return len(self.catalog)

    @property
    def running(self) -> bool:
        return self._inflight is not None

    def ensure_seeded(
        self,
        force: bool = False,
        *,
        max_items: Optional[int] = None,
        time_budget_ms: Optional[int] = None,
    ) -> Optional[SeedBatchResult]:
        """Seed missing terms unless the store already holds the whole catalog.

        Returns ``None`` when seeding was skipped. ``max_items`` and
        ``time_budget_ms`` override the configured budget for this call only.
        """
        return self._run_exclusive(
            lambda: self._seed(
                force,
                self.max_items if max_items is None else max_items,
                self.time_budget_ms if time_budget_ms is None else time_budget_ms,
            ),
            joinable=True,
        )

    def refresh(
        self,
        offset: int = 0,
        *,
        max_items: Optional[int] = None,
        time_budget_ms: Optional[int] = None,
    ) -> SeedBatchResult:
        """Rewrite catalog terms from ``offset`` on, existing rows included.

        A refresh never joins another batch: it waits for any in-flight seed or
        refresh to finish and then runs its own.
        """
        return self._run_exclusive(
            lambda: self._refresh(
                offset,
                self.max_items if max_items is None else max_items,
                self.time_budget_ms if time_budget_ms is None else time_budget_ms,
            ),
            joinable=False,
        )

    def _run_exclusive(self, work: Callable[[], Optional[SeedBatchResult]], *, joinable: bool):
        while True:
            with self._lock:
                inflight = self._inflight
                if inflight is None:
                    inflight = self._inflight = Future()
                    self._inflight_joinable = joinable
                    break
                join = joinable and self._inflight_joinable
            if join:
                logger.info("Dictionary seed already running; joining in-flight batch")
                return inflight.result()
            logger.info("Dictionary batch in flight; waiting for it to finish")
            wait([inflight])

        # The slot is freed before waiters wake so they never see a finished batch
        try:
            result = work()
        except BaseException as exc:
            logger.error("Dictionary batch failed: %s", exc)
            self._release_slot()
            inflight.set_exception(exc)
            raise
        self._release_slot()
        inflight.set_result(result)
        return result

    def _release_slot(self) -> None:
        with self._lock:
            self._inflight = None

    def _run_kwargs(self) -> dict:
        return {} if self._clock is None else {"clock": self._clock}

    def _seed(self, force: bool, max_items: int, time_budget_ms: int) -> Optional[SeedBatchResult]:
        expected = self.expected_count
        if not force:
            current = self.repository.count_terms()
            if current >= expected:
                logger.debug("Dictionary already seeded (%s/%s terms); skipping", current, expected)
                return None

        logger.info("Seeding dictionary (force=%s, expected=%s)", force, expected)
        return run_batch(self.catalog, self.repository, max_items, time_budget_ms, **self._run_kwargs())

    def _refresh(self, offset: int, max_items: int, time_budget_ms: int) -> SeedBatchResult:
        logger.info("Refreshing dictionary from offset %s of %s terms", offset, self.expected_count)
        return run_batch(
            self.catalog[offset:],
            self.repository,
            max_items,
            time_budget_ms,
            include_existing=True,
            **self._run_kwargs(),
        )
