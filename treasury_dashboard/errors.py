from __future__ import annotations

from typing import Iterable, Tuple

PARSE_FAILURE_MESSAGE = "Unable to parse uploaded file. Please use CSV or TSV format."


class UploadError(ValueError):
    """An upload was rejected; str() is the message shown to the user."""


class SchemaValidationError(UploadError):
    def __init__(self, missing: Iterable[str]):
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__(f"Missing required columns: {', '.join(self.missing)}")


class ParseFailure(UploadError):
    def __init__(self, message: str = PARSE_FAILURE_MESSAGE):
        super().__init__(message)
