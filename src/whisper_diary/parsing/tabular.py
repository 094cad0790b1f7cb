"""Delimited-table parsing with strict and tolerant modes."""

import csv
import io
import math
from typing import Any, Iterable

from whisper_diary.core.exceptions import ParseError, ParseReason
from whisper_diary.utils import get_logger

logger = get_logger(__name__)

Record = dict[str, Any]


def coerce_number(value: str) -> int | float:
    """Cast a numeric-looking string to int or float.
    
    Raises:
        ValueError: If the value is not numeric or not finite
    """
    try:
        return int(value)
    except ValueError:
        number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return number


def parse_table(
    text: str,
    *,
    tolerant: bool = False,
    required: Iterable[str] = (),
    coerce: Iterable[str] = (),
) -> list[Record]:
    """Parse CSV text with a header row into one record per data row.
    
    Every header name and field is whitespace-trimmed and blank lines are
    skipped. In strict mode malformed quoting, a row whose width differs
    from the header, or a non-numeric value in a ``coerce`` column raises
    ``ParseError``. Tolerant mode reads stray quotes as literal text, pads
    short rows, ignores extra cells, and drops rows that have an empty
    ``required`` field or a bad ``coerce`` value. A quoted field left open
    to the end of the input fails in both modes.
    
    Args:
        text: Raw file contents
        tolerant: Relax quoting and column-count rules
        required: Column names the header must contain
        coerce: Columns to cast with ``coerce_number``
        
    Returns:
        Records mapping header name to value, in file order
        
    Raises:
        ParseError: If the text cannot be tokenized or the header is absent
    """
    required = tuple(required)
    coerce = tuple(coerce)
    lines = io.StringIO(text.lstrip("\ufeff"), newline="").readlines()
    reader = csv.reader(
        lines,
        skipinitialspace=True,
        strict=not tolerant,
    )
    records: list[Record] = []
    dropped = 0
    
    try:
        header = _read_header(reader, required)
        width = len(header)
        row_start = reader.line_num + 1
        
        for row in reader:
            line, row_start = row_start, reader.line_num + 1
            if tolerant and reader.line_num == len(lines):
                _ensure_quotes_closed(lines[line - 1:], line)
            if not any(cell.strip() for cell in row):
                continue
            
            if len(row) != width:
                if not tolerant:
                    raise ParseError(
                        f"Expected {width} columns, found {len(row)}",
                        ParseReason.COLUMNS,
                        line=line,
                    )
                row = (row + [""] * width)[:width]
            
            record = {name: cell.strip() for name, cell in zip(header, row)}
            
            missing = [name for name in required if not record[name]]
            if missing and tolerant:
                logger.warning(f"Dropping line {line}: empty {', '.join(missing)}")
                dropped += 1
                continue
            
            try:
                for name in coerce:
                    record[name] = coerce_number(record[name])
            except ValueError:
                if not tolerant:
                    raise ParseError(
                        f"Column '{name}' is not numeric: {record[name]!r}",
                        ParseReason.VALUE,
                        line=line,
                    ) from None
                logger.warning(f"Dropping line {line}: non-numeric {name}")
                dropped += 1
                continue
            
            records.append(record)
    except csv.Error as e:
        if "field larger than field limit" in str(e):
            raise ParseError(f"Field too large: {e}", ParseReason.VALUE, line=reader.line_num) from e
        raise ParseError(f"Malformed quoting: {e}", ParseReason.QUOTING, line=reader.line_num) from e
    
    logger.debug(f"Parsed {len(records)} rows ({dropped} dropped)")
    return records


def _read_header(reader, required: tuple[str, ...]) -> list[str]:
    """Consume the first non-blank row and check it names every required column."""
    for row in reader:
        if any(cell.strip() for cell in row):
            header = [cell.strip() for cell in row]
            break
    else:
        raise ParseError("Missing header row", ParseReason.HEADER)
    
    absent = [name for name in required if name not in header]
    if absent:
        raise ParseError(
            f"Header is missing column(s): {', '.join(absent)}",
            ParseReason.HEADER,
            line=reader.line_num,
        )
    return header


def _ensure_quotes_closed(lines: list[str], line: int) -> None:
    """Fail if the last record opens a quoted field that never closes.
    
    The relaxed reader would otherwise fold every following row into that
    field. Other strict-mode complaints are ignored here since tolerant
    parsing accepts them.
    """
    try:
        for _ in csv.reader(lines, skipinitialspace=True, strict=True):
            pass
    except csv.Error as e:
        if "unexpected end of data" in str(e):
            raise ParseError(
                "Quoted field is never closed",
                ParseReason.QUOTING,
                line=line,
            ) from e
