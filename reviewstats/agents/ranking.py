"""
Ranker.

Orders aggregated values descending. Ties keep the iteration order of
the input mapping (Python's sort is stable), so a fixed input order
always gives the same ranking.
"""

from typing import Dict, List

from reviewstats.models.report import GroupedMetric, Number


class Ranker:
    """Sorts grouped metrics by value, highest first."""

    def rank(self, values: Dict[str, Number]) -> List[GroupedMetric]:
        """
        Rank a mapping of asin -> value.

        Args:
            values: Aggregated values, e.g. from Aggregator.aggregate()

        Returns:
            GroupedMetric list, value descending, ties in encounter order
        """
        metrics = [GroupedMetric(asin=key, value=value) for key, value in values.items()]
        return sorted(metrics, key=lambda metric: metric.value, reverse=True)
