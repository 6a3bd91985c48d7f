"""
Table input and output.

Rows are read with pandas as plain strings so coordinate columns reach the
pipeline exactly as written; empty cells become None. Values are keyed by
the header names as written: pandas renames repeated headers ("lat.1"), so
the header line is read separately and a repeated name keeps its first
value. Data lines longer than the header are cut to the header width.
Output goes through csv.DictWriter with the first row's keys as header.
"""
import csv
import logging
import os
from typing import Dict, Iterable, List, Optional

import pandas as pd

from src.geocoding.exceptions import InputFileNotFound

logger = logging.getLogger(__name__)


def read_rows(file_path: str) -> List[Dict[str, Optional[str]]]:
    """Load every row of a CSV file as an ordered column -> value mapping."""
    if not os.path.isfile(file_path):
        raise InputFileNotFound(file_path)

    header = read_header(file_path)
    if not header:
        logger.warning(f"Input file '{file_path}' is empty")
        return []

    def truncate(bad_line):
        logger.warning(f"Dropping {len(bad_line) - len(header)} extra field(s) from row {bad_line}")
        return bad_line[:len(header)]

    try:
        df = pd.read_csv(
            file_path,
            dtype=str,
            keep_default_na=False,
            na_values=[""],
            index_col=False,
            engine="python",
            on_bad_lines=truncate,
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"Input file '{file_path}' is empty")
        return []

    rows = []
    for values in df.itertuples(index=False, name=None):
        row = {}
        for col, val in zip(header, values):
            if col not in row:
                row[col] = None if pd.isna(val) else val
        rows.append(row)
    return rows


def read_header(file_path: str) -> List[str]:
    """Column names of the first non-blank line, repeats included."""
    with open(file_path, newline="", encoding="utf-8") as f:
        for line in csv.reader(f):
            if line:
                return line
    return []


def write_rows(rows: Iterable[Dict[str, Optional[str]]], file_path: str) -> bool:
    """
    Write rows with a header taken from the first row's keys.

    Returns False without touching the file system when there are no rows.
    """
    rows = list(rows)
    if not rows:
        return False

    with open(file_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()), extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

    logger.debug(f"Wrote {len(rows)} rows to {file_path}")
    return True
