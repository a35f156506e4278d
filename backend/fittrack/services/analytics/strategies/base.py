"""
Base Strategy - Abstract interface for per-collection statistics.
"""
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, TypeVar

from fittrack.services.analytics.adapter import RecordAdapter

T = TypeVar("T")

NO_CATEGORY = "None"


class StatsStrategy(ABC):
    """
    Abstract base class for the statistics of one record collection.

    Statistics are kept as running counters (totals, frequency maps,
    monthly buckets) plus fields derived from them (averages, trends,
    percentages). ``accumulate`` folds one record into the counters and
    ``finalize`` recomputes every derived field, so a full recompute and
    a sequence of single-record increments end in the same state.
    """

    collection: str = "unknown"

    @property
    @abstractmethod
    def adapter(self) -> RecordAdapter:
        """Adapter that normalizes raw documents of this collection."""
        pass

    @abstractmethod
    def empty(self) -> Any:
        """Zero-valued statistics."""
        pass

    @abstractmethod
    def accumulate(self, stats: Any, record: Any) -> None:
        """
        Fold one normalized record into the running counters.

        Args:
            stats: Statistics to update in place
            record: Normalized record
        """
        pass

    @abstractmethod
    def finalize(self, stats: Any) -> None:
        """
        Recompute derived fields from the counters.

        Args:
            stats: Statistics to update in place
        """
        pass

    def add(self, stats: Any, raw_record: Mapping[str, Any]) -> None:
        """Normalize a raw document and fold it into ``stats``."""
        self.accumulate(stats, self.adapter.normalize(raw_record))

    def compute(self, raw_records: Iterable[Mapping[str, Any]]) -> Any:
        """
        Compute statistics over a set of raw documents.

        Args:
            raw_records: Documents as returned by the store

        Returns:
            Finalized statistics
        """
        stats = self.empty()
        for raw_record in raw_records:
            self.add(stats, raw_record)
        self.finalize(stats)
        return stats


# ========================================
# Shared Helpers
# ========================================

def increment(counts: Dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


def safe_average(total: float, count: int) -> float:
    """total / count, or 0 when there is nothing to average."""
    if not count:
        return 0
    return total / count


def calculate_trend(current: float, previous: float) -> float:
    """
    Percentage change from ``previous`` to ``current``.

    Going from nothing to something counts as +100%.
    """
    if previous == 0:
        return 100 if current > 0 else 0
    return ((current - previous) / previous) * 100


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def most_frequent(counts: Mapping[str, int]) -> str:
    """Key with the highest count; ties go to the first key. ``"None"`` if empty."""
    if not counts:
        return NO_CATEGORY
    return max(counts.items(), key=lambda item: item[1])[0]


def sorted_months(monthly: Dict[str, T]) -> Dict[str, T]:
    """Monthly buckets ordered by ``YYYY-MM`` key (chronological)."""
    return dict(sorted(monthly.items()))


def latest_two(monthly: Mapping[str, T]) -> Optional[Tuple[T, T]]:
    """(current, previous) buckets, or None with fewer than two months."""
    months = sorted(monthly)
    if len(months) < 2:
        return None
    return monthly[months[-1]], monthly[months[-2]]
