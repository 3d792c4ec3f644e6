"""
Storage utility.

Writes report tables to comma-separated files.
"""

import logging
from pathlib import Path
from typing import Union

from reviewstats.models.report import Report

logger = logging.getLogger(__name__)


class ReportWriter:
    """
    Writes Report tables as UTF-8 CSV: header row first, one row per line.

    Fields containing commas, quotes or line breaks are quoted.
    """

    def __init__(self, encoding: str = "utf-8", line_terminator: str = "\n"):
        self.encoding = encoding
        self.line_terminator = line_terminator

    def write(self, report: Report, path: Union[str, Path]) -> Path:
        """
        Write one report, replacing any existing file.

        Args:
            report: Report to write
            path: Destination file

        Returns:
            The path written

        Raises:
            OSError: If the file cannot be created or written
        """
        path = Path(path)
        df = report.to_dataframe()

        try:
            df.to_csv(
                path,
                index=False,
                encoding=self.encoding,
                lineterminator=self.line_terminator
            )
        except OSError as e:
            logger.error(f"Failed to write {report.name} report to {path}: {e}")
            raise

        logger.info(f"Saved {report.name} report ({len(report)} rows) to {path}")
        return path
