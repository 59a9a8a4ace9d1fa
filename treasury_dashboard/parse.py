from __future__ import annotations

import re
from typing import List, Sequence

from .errors import ParseFailure, SchemaValidationError, UploadError
from .models import RawRecord

_LINE_BREAK_RE = re.compile(r"\r?\n")
_BOM = "\ufeff"


def detect_delimiter(header_line: str) -> str:
    # One guess for the whole file, taken from the header only.
    return "\t" if "\t" in header_line else ","


def _split_lines(text: str) -> List[str]:
    return _LINE_BREAK_RE.split(text.lstrip(_BOM).strip())


def _missing_columns(headers: Sequence[str], required_columns: Sequence[str]) -> List[str]:
    present = set(headers)
    return [col for col in required_columns if col not in present]


def _to_record(headers: Sequence[str], line: str, delimiter: str) -> RawRecord:
    values = line.split(delimiter)
    record: RawRecord = {}
    for i, header in enumerate(headers):
        record[header] = values[i].strip() if i < len(values) else ""
    return record


def parse_delimited(text: str, required_columns: Sequence[str]) -> List[RawRecord]:
    """
    Parse CSV or TSV text into raw records keyed by header name.

    The first line is the header. Quoted fields are not supported: a value
    containing the delimiter shifts every column after it. Raises
    SchemaValidationError when a required column is absent and ParseFailure
    for anything else that goes wrong.
    """
    try:
        lines = _split_lines(text)
        delimiter = detect_delimiter(lines[0])
        headers = [h.strip() for h in lines[0].split(delimiter)]

        missing = _missing_columns(headers, required_columns)
        if missing:
            raise SchemaValidationError(missing)

        return [_to_record(headers, line, delimiter) for line in lines[1:] if line]
    except UploadError:
        raise
    except Exception as exc:
        raise ParseFailure() from exc


def decode_upload(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except (UnicodeDecodeError, AttributeError) as exc:
        raise ParseFailure() from exc
