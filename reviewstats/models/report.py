"""
Report data models.

GroupedMetric is one (product, value) pair produced by aggregation.
Report is an ordered table ready to be written as CSV.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Union

import pandas as pd

Number = Union[int, float]


@dataclass(frozen=True)
class GroupedMetric:
    """
    Aggregated value for one product identifier.
    The meaning of value depends on the reduction (count or average).
    """
    asin: str
    value: Number

    def as_tuple(self) -> Tuple[str, Number]:
        return (self.asin, self.value)


@dataclass
class Report:
    """
    An ordered report table.
    Rows are tuples in header order; row position is the only identity a row has.
    """
    name: str  # e.g. "popularity"
    header: List[str]
    rows: List[tuple] = field(default_factory=list)

    def __post_init__(self):
        for row in self.rows:
            if len(row) != len(self.header):
                raise ValueError(
                    f"Row {row!r} has {len(row)} fields, "
                    f"header {self.header} expects {len(self.header)}"
                )

    def __len__(self) -> int:
        return len(self.rows)

    def column(self, index: int) -> list:
        """Values of one column, in row order."""
        return [row[index] for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a DataFrame with the report header as columns."""
        return pd.DataFrame(self.rows, columns=self.header)
