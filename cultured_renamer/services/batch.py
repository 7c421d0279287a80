"""Batch planning over many relocation contexts."""
from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..core.errors import ErrorKind
from ..core.models import RelocationContext, RelocationResult
from ..core.protocols import ProgressReporter, Renamer


@dataclass(slots=True)
class RelocationStats:
    """Mutable statistics for a planning run."""
    total: int = 0
    planned: int = 0
    failed: int = 0
    failures: Counter = field(default_factory=Counter)

    def record(self, result: RelocationResult) -> None:
        """Record a relocation result."""
        self.total += 1
        match result.error:
            case None:
                self.planned += 1
            case error:
                self.failed += 1
                self.failures[error.kind] += 1

    def failures_of(self, kind: ErrorKind) -> int:
        return self.failures.get(kind, 0)


@dataclass(frozen=True, slots=True)
class BatchPlan:
    """Results in input order, plus their statistics."""
    results: tuple[RelocationResult, ...]
    stats: RelocationStats

    @property
    def all_planned(self) -> bool:
        return self.stats.failed == 0


def plan_batch(
    renamer: Renamer,
    contexts: Iterable[RelocationContext],
    workers: int = 1,
    progress: Optional[ProgressReporter] = None,
) -> BatchPlan:
    """Plan every context with renamer.

    Each call is independent, so with workers > 1 they run on a thread
    pool. Results keep the order of contexts.

    Args:
        renamer: Renamer to plan with.
        contexts: Contexts to plan.
        workers: Number of threads (1 = run inline).
        progress: Optional progress reporter.

    Returns:
        The batch plan.
    """
    if workers < 1:
        raise ValueError("Workers must be at least 1")

    items = list(contexts)
    stats = RelocationStats()

    if progress:
        progress.start_phase("Planning", len(items))

    try:
        if workers == 1 or len(items) <= 1:
            results = []
            for ctx in items:
                results.append(renamer.get_new_path(ctx))
                if progress:
                    progress.advance_phase()
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                results = []
                # map() yields in submission order
                for result in executor.map(renamer.get_new_path, items):
                    results.append(result)
                    if progress:
                        progress.advance_phase()
    finally:
        if progress:
            progress.end_phase()

    for result in results:
        stats.record(result)

    if progress:
        progress.debug(f"Planned {stats.planned} of {stats.total} files")

    return BatchPlan(results=tuple(results), stats=stats)
