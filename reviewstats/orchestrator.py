"""
Pipeline Orchestrator.

Runs the four report steps in a fixed order over one loaded record set.
"""

import logging
from typing import Callable, Dict, List, Optional

from reviewstats.agents.aggregation import Aggregator, Reduction, dedupe_by_product, representatives
from reviewstats.agents.filters import DateRangeFilter, TextSearchFilter
from reviewstats.agents.ranking import Ranker
from reviewstats.models.report import GroupedMetric, Report
from reviewstats.models.review import Record, is_verified, product_id, review_text, style
from reviewstats.utils.storage import ReportWriter
from reviewstats.utils.style import format_style
import config.settings as settings

logger = logging.getLogger(__name__)


def _verified_text(record: Record) -> str:
    return "true" if is_verified(record) else "false"


class PipelineOrchestrator:
    """
    Produces the review reports.

    Steps:
    1. Popularity (review count per product)
    2. Rating (average overall rating per product)
    3. Popularity within a date window
    4. Reviews matching a search term, one per product

    Each step takes the full record set plus its own parameters and
    returns a Report; run() sequences them, prompts, and writes files.
    """

    def __init__(
        self,
        output_config: settings.OutputConfig,
        writer: Optional[ReportWriter] = None,
        out: Callable[[str], None] = print
    ):
        """
        Initialize pipeline orchestrator.

        Args:
            output_config: Destination paths for the four reports
            writer: CSV writer (defaults to ReportWriter())
            out: Sink for user-facing status lines
        """
        self.output_config = output_config
        self.writer = writer or ReportWriter()
        self.out = out

        self.aggregator = Aggregator()
        self.ranker = Ranker()

    # ------------------------------------------------------------------
    # Report steps
    # ------------------------------------------------------------------

    def popularity_report(self, records: List[Record]) -> Report:
        """Products ranked by number of reviews."""
        return self._ranked_report(
            name="popularity",
            header=settings.POPULAR_PRODUCTS_HEADER,
            records=records,
            reduction=Reduction.COUNT
        )

    def rating_report(self, records: List[Record]) -> Report:
        """Products ranked by average overall rating."""
        return self._ranked_report(
            name="rating",
            header=settings.RATED_PRODUCTS_HEADER,
            records=records,
            reduction=Reduction.AVERAGE
        )

    def period_report(self, records: List[Record], start_date: str, end_date: str) -> Report:
        """
        Products ranked by number of reviews written between two dates.

        Args:
            records: Full record set
            start_date: First day, 'MM dd, yyyy'
            end_date: Last day, 'MM dd, yyyy' (inclusive)

        Raises:
            InvalidDateFormat: If either date is malformed
        """
        in_period = DateRangeFilter(start_date, end_date).apply(records)
        return self._ranked_report(
            name="popularity-in-period",
            header=settings.POPULAR_PRODUCTS_PERIOD_HEADER,
            records=in_period,
            reduction=Reduction.COUNT
        )

    def matched_report(self, records: List[Record], search_term: str) -> Report:
        """
        First review per product whose text contains search_term (any case).

        Rows carry the matching review's own text, verified flag and style.
        """
        matched = TextSearchFilter(search_term).apply(records)
        rows = [
            (
                product_id(record),
                review_text(record),
                _verified_text(record),
                format_style(style(record))
            )
            for record in dedupe_by_product(matched)
        ]
        return Report(name="matched-reviews", header=settings.MATCHED_PRODUCTS_HEADER, rows=rows)

    def _ranked_report(
        self,
        name: str,
        header: List[str],
        records: List[Record],
        reduction: Reduction
    ) -> Report:
        """Aggregate, rank, and join with each product's representative record."""
        ranked: List[GroupedMetric] = self.ranker.rank(
            self.aggregator.aggregate(records, reduction)
        )
        chosen: Dict[str, Record] = representatives(records)

        rows = []
        for metric in ranked:
            product = chosen[metric.asin]
            rows.append((
                metric.asin,
                metric.value,
                _verified_text(product),
                format_style(style(product))
            ))

        logger.info(f"Built {name} report with {len(rows)} products")
        return Report(name=name, header=header, rows=rows)

    # ------------------------------------------------------------------
    # Full run
    # ------------------------------------------------------------------

    def run(
        self,
        records: List[Record],
        prompt: Optional[Callable[[str], str]] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        search_term: Optional[str] = None
    ) -> List[str]:
        """
        Produce all four reports in order.

        Dates and search term are requested through prompt() unless they
        were supplied up front. A bad date aborts the run before the
        period report and everything after it.

        Args:
            records: Loaded review records
            prompt: Reads one line of user input given a prompt text
                (defaults to input())
            start_date: Start date, skips the prompt when set
            end_date: End date, skips the prompt when set
            search_term: Search text, skips the prompt when set

        Returns:
            Paths of the written report files, in write order

        Raises:
            InvalidDateFormat: If a date is malformed
            OSError: If a report file cannot be written
        """
        logger.info(f"Starting report pipeline over {len(records)} records")
        prompt = prompt or input
        config = self.output_config
        written = []

        written.append(self._write(self.popularity_report(records), config.popular_products,
                                   "Popular products written to"))
        written.append(self._write(self.rating_report(records), config.rated_products,
                                   "Products by rating written to"))

        if start_date is None:
            start_date = prompt(settings.START_DATE_PROMPT)
        if end_date is None:
            end_date = prompt(settings.END_DATE_PROMPT)
        written.append(self._write(self.period_report(records, start_date, end_date),
                                   config.popular_products_period,
                                   "Popular products for the period written to"))

        if search_term is None:
            search_term = prompt(settings.SEARCH_PROMPT)
        written.append(self._write(self.matched_report(records, search_term),
                                   config.matched_products,
                                   "Matched products written to"))

        self.out("Review data processed and exported to CSV files.")
        logger.info("Report pipeline complete")
        return written

    def _write(self, report: Report, path, message: str) -> str:
        self.writer.write(report, path)
        self.out(f"{message} {path}")
        return str(path)
