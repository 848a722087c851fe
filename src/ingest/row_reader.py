"""Delimited event file reader.

This module maps each data line onto the header row by column order.
Lines whose field count differs from the header are reported as
malformed instead of failing the whole file.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterator

from core.constants import FILE_ENCODING
from core.errors import EventLoadIngestError
from core.types import MalformedRow, ParsedRow


def read_rows(file_path: Path, delimiter: str) -> Iterator[ParsedRow | MalformedRow]:
    """Yield parsed or malformed rows from one input file.

    The first line is the header. A file without a header yields nothing.

    Args:
        file_path: Input file path.
        delimiter: Single-character field delimiter.

    Yields:
        One ``ParsedRow`` or ``MalformedRow`` per data line.

    Raises:
        EventLoadIngestError: If the file cannot be opened, decoded, or parsed.
    """
    try:
        with file_path.open("r", encoding=FILE_ENCODING, newline="") as handle:
            reader = csv.reader(handle, delimiter=delimiter)
            header = next(reader, None)
            if header is None:
                return
            for values in reader:
                yield _build_row(file_path, reader.line_num, header, values)
    except (OSError, UnicodeDecodeError, csv.Error) as error:
        raise EventLoadIngestError(
            f"Failed to read input file {file_path}: {error}. "
            "Fix or remove the file and retry; it was left in the intake directory."
        ) from error


def _build_row(
    file_path: Path,
    line_number: int,
    header: list[str],
    values: list[str],
) -> ParsedRow | MalformedRow:
    """Map one line onto the header, or flag it on a count mismatch."""
    if len(values) != len(header):
        return MalformedRow(
            source_path=file_path,
            line_number=line_number,
            expected_count=len(header),
            actual_count=len(values),
        )
    return ParsedRow(
        source_path=file_path,
        line_number=line_number,
        fields=dict(zip(header, values)),
    )
