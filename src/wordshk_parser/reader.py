"""
Batch parsing of the words.hk CSV export.

Reads the export's rows, skips the rows that carry no entry, and parses the
rest. A row that fails to parse is counted and recorded; it never stops the
batch.
"""
from __future__ import annotations

import csv
import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .config import ParserConfig
from .entry import parse_entry
from .exceptions import DataSourceError, ParseError
from .models import CsvRecord, DictionaryEntry

logger = logging.getLogger(__name__)

CSV_HEADERS = ("id", "headword", "entry", "variants", "warning", "public")


# =============================================================================
# Results
# =============================================================================

@dataclass
class RowFailure:
    """A row that could not be parsed."""
    row_id: str
    message: str


@dataclass
class ParseStats:
    """Counters for one batch."""
    total: int = 0
    parsed: int = 0
    no_data: int = 0
    unpublished: int = 0
    unreviewed: int = 0
    errors: int = 0
    failures: List[RowFailure] = field(default_factory=list)


@dataclass
class BatchResult:
    """Entries parsed from a batch of rows, with statistics."""
    entries: List[DictionaryEntry]
    stats: ParseStats


@dataclass
class CsvInfo:
    """The full export found in a data folder."""
    all_csv: str
    date_string: str


# =============================================================================
# Reading
# =============================================================================

def read_csv_records(
    path: Union[str, Path],
    skip_lines: int = 2,
) -> List[CsvRecord]:
    """Read the rows of an export file.

    Args:
        path: Path to the CSV file
        skip_lines: Number of preamble lines before the first row

    Returns:
        One CsvRecord per row

    Raises:
        DataSourceError: If a row does not have exactly six fields
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    records: List[CsvRecord] = []

    with open(path, "r", encoding="utf-8", newline="") as f:
        for _ in range(skip_lines):
            if not f.readline():
                break
        reader = csv.reader(f, quotechar='"', strict=True)
        try:
            for row in reader:
                if not row:
                    continue
                if len(row) != len(CSV_HEADERS):
                    raise DataSourceError(
                        f"{path}: row at line {reader.line_num + skip_lines} has "
                        f"{len(row)} fields, expected {len(CSV_HEADERS)}"
                    )
                records.append(CsvRecord(*row))
        except csv.Error as e:
            raise DataSourceError(
                f"{path}: malformed CSV at line {reader.line_num + skip_lines}: {e}"
            ) from e

    logger.info(f"Read {len(records)} entries from {path}")
    return records


def get_csv_info(data_folder: Union[str, Path]) -> CsvInfo:
    """Find the ``all-<epoch>.csv`` export in a folder and work out its date.

    Raises:
        DataSourceError: If no such file is present
    """
    folder = Path(data_folder)
    if not folder.is_dir():
        raise FileNotFoundError(f"Folder not found: {folder}")

    names = sorted(p.name for p in folder.iterdir() if p.is_file())
    all_csv = next(
        (n for n in names if n.startswith("all-") and n.endswith(".csv")),
        None,
    )
    if all_csv is None:
        raise DataSourceError(f"No all- file found in {folder}")

    epoch = all_csv[len("all-"):].split(".")[0]
    try:
        date = datetime.fromtimestamp(int(epoch), tz=timezone.utc)
    except ValueError as e:
        raise DataSourceError(f"Cannot read date from {all_csv}: {e}") from e

    date_string = date.strftime("%Y-%m-%d")
    logger.info(f"Date of data: {date_string}")
    return CsvInfo(all_csv=all_csv, date_string=date_string)


# =============================================================================
# Parsing
# =============================================================================

def _parse_one(
    record: CsvRecord,
) -> Tuple[Optional[DictionaryEntry], Optional[str]]:
    """Parse a row, returning ``(entry, None)`` or ``(None, error message)``."""
    try:
        return parse_entry(record), None
    except ParseError as e:
        return None, str(e)


def parse_records(
    records: Iterable[CsvRecord],
    config: Optional[ParserConfig] = None,
) -> BatchResult:
    """Parse a batch of rows.

    Rows whose entry is the no-data marker are skipped. Unreviewed and
    unpublished rows are counted and still parsed. With ``config.workers``
    above one, rows are parsed in a process pool; the result is the same as
    parsing them in order.

    Args:
        records: Rows to parse
        config: Parser settings (defaults if omitted)

    Returns:
        BatchResult with the parsed entries in input order
    """
    config = config or ParserConfig()
    stats = ParseStats()
    to_parse: List[CsvRecord] = []

    for record in records:
        stats.total += 1
        if record.entry == config.no_data_marker:
            stats.no_data += 1
            logger.debug(f"Skipping entry {record.id}: no data")
            continue
        if config.unreviewed_marker and config.unreviewed_marker in record.warning:
            stats.unreviewed += 1
        if record.public != config.published_value:
            stats.unpublished += 1
        to_parse.append(record)

    if config.workers > 1 and len(to_parse) > 1:
        with ProcessPoolExecutor(max_workers=config.workers) as pool:
            outcomes = list(pool.map(_parse_one, to_parse, chunksize=config.chunk_size))
    else:
        outcomes = [_parse_one(record) for record in to_parse]

    entries: List[DictionaryEntry] = []
    for record, (entry, error) in zip(to_parse, outcomes):
        if entry is not None:
            entries.append(entry)
            continue
        stats.errors += 1
        stats.failures.append(RowFailure(row_id=record.id, message=error or ""))
        logger.warning(f"Error parsing entry {record.id}: {error}")

    stats.parsed = len(entries)
    logger.info(f"Parsed {stats.parsed} entries")
    logger.info(f"Skipped {stats.no_data} no data entries")
    if stats.errors:
        logger.info(f"Encountered {stats.errors} parsing errors")

    return BatchResult(entries=entries, stats=stats)


def parse_csv_file(
    path: Union[str, Path],
    config: Optional[ParserConfig] = None,
) -> BatchResult:
    """Read and parse an export file.

    Raises:
        FileNotFoundError: If the file does not exist
        DataSourceError: If the file is not a well-formed export
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")

    config = config or ParserConfig()
    records = read_csv_records(path, skip_lines=config.skip_lines)
    return parse_records(records, config)
