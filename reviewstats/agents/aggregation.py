"""
Aggregator and representative-record selection.

Groups records by product identifier (asin) and folds each group with a
pluggable reduction. Groups appear in the order their first contributing
record was seen, which the Ranker relies on for tie-breaking.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Tuple

from reviewstats.errors import MissingFieldError
from reviewstats.models.review import Record, product_id, rating

logger = logging.getLogger(__name__)


class Reduction(Enum):
    """Reduction applied to each product group."""
    COUNT = "count"
    AVERAGE = "average"


class Reducer:
    """
    A fold over one group: start() -> step()* -> finish().

    step() may raise MissingFieldError to exclude a record from the group.
    """

    def __init__(
        self,
        start: Callable[[], Any],
        step: Callable[[Any, Record], Any],
        finish: Callable[[Any], Any]
    ):
        self.start = start
        self.step = step
        self.finish = finish


def _average_step(acc: Tuple[float, int], record: Record) -> Tuple[float, int]:
    total, n = acc
    return (total + rating(record), n + 1)


REDUCERS: Dict[Reduction, Reducer] = {
    Reduction.COUNT: Reducer(
        start=lambda: 0,
        step=lambda acc, record: acc + 1,
        finish=lambda acc: acc
    ),
    Reduction.AVERAGE: Reducer(
        start=lambda: (0.0, 0),
        step=_average_step,
        finish=lambda acc: acc[0] / acc[1]
    ),
}


class Aggregator:
    """
    Groups records by asin under a reduction.

    Pure: records are read, never modified.
    """

    def __init__(self, reducers: Dict[Reduction, Reducer] = None):
        self.reducers = dict(reducers or REDUCERS)

    def aggregate(self, records: Iterable[Record], reduction: Reduction) -> Dict[str, Any]:
        """
        Aggregate records per product identifier.

        Args:
            records: Review records in load order
            reduction: COUNT (reviews per asin) or AVERAGE (mean overall rating)

        Returns:
            Dict of asin -> aggregated value, in first-seen order.
            Records lacking asin, or lacking a field the reduction needs,
            are left out.
        """
        reducer = self.reducers[reduction]
        accumulators: Dict[str, Any] = {}
        excluded = 0

        for record in records:
            try:
                key = product_id(record)
                acc = accumulators[key] if key in accumulators else reducer.start()
                accumulators[key] = reducer.step(acc, record)
            except MissingFieldError as e:
                excluded += 1
                logger.debug(f"Excluding record from {reduction.value} aggregation: {e}")

        if excluded:
            logger.info(f"{excluded} records excluded from {reduction.value} aggregation")

        return {key: reducer.finish(acc) for key, acc in accumulators.items()}


def representatives(records: Iterable[Record]) -> Dict[str, Record]:
    """
    Pick the first-encountered record for every distinct asin.

    Records without asin are ignored.
    """
    chosen: Dict[str, Record] = {}
    for record in records:
        try:
            key = product_id(record)
        except MissingFieldError:
            continue
        if key not in chosen:
            chosen[key] = record
    return chosen


def dedupe_by_product(records: Iterable[Record]) -> List[Record]:
    """
    Keep only the first record per asin, preserving order.

    Records without asin are dropped.
    """
    return list(representatives(records).values())
