"""
Ingestion Agent.

Loads review records from a JSON-lines file: one JSON object per line.
Malformed lines are skipped and logged; they never abort the load.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from reviewstats.errors import RecordParseError
from reviewstats.models.review import Record

logger = logging.getLogger(__name__)


class RecordLoader:
    """
    Reads review records in load order.

    After load(), `loaded` and `skipped` hold the counts of the last run.
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize record loader.

        Args:
            encoding: Text encoding of the input file
        """
        self.encoding = encoding
        self.loaded = 0
        self.skipped = 0

    def load(self, path: Union[str, Path]) -> List[Record]:
        """
        Load all well-formed records from a file.

        Args:
            path: Path to a JSON-lines review file

        Returns:
            Records in file order

        Raises:
            OSError: If the file cannot be opened or read
        """
        path = Path(path)
        logger.info(f"Loading reviews from {path}")

        with path.open("rb") as fp:
            records = self.load_lines(fp, source=str(path))

        logger.info(
            f"Loaded {self.loaded} records from {path} "
            f"({self.skipped} malformed lines skipped)"
        )
        return records

    def load_lines(
        self,
        lines: Iterable[Union[str, bytes]],
        source: str = "<input>"
    ) -> List[Record]:
        """
        Parse an iterable of lines, skipping the ones that fail to parse.

        Lines may be text or raw bytes; bytes are decoded one line at a
        time so a badly encoded line is skipped like any other malformed
        line. Blank lines are ignored without counting as malformed.
        """
        self.loaded = 0
        self.skipped = 0
        records: List[Record] = []

        for idx, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                records.append(self.parse_line(line, idx, self.encoding))
            except RecordParseError as e:
                self.skipped += 1
                logger.warning(f"Skipping malformed record in {source}: {e}")

        self.loaded = len(records)
        return records

    @staticmethod
    def parse_line(
        line: Union[str, bytes],
        line_number: int = None,
        encoding: str = "utf-8"
    ) -> Record:
        """
        Parse one line into a record.

        Raises:
            RecordParseError: If the line cannot be decoded or is not a JSON object
        """
        if isinstance(line, bytes):
            try:
                line = line.decode(encoding)
            except UnicodeDecodeError as e:
                raise RecordParseError(f"undecodable bytes ({e.reason})", line_number) from e

        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            raise RecordParseError(f"invalid JSON ({e.msg})", line_number) from e
        except RecursionError as e:
            raise RecordParseError("JSON nested too deeply", line_number) from e

        if not isinstance(record, dict):
            raise RecordParseError(
                f"expected a JSON object, got {type(record).__name__}",
                line_number
            )
        return record
