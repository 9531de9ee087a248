"""Exception types raised while reading and writing content documents.

Every error derives from :class:`ValueError` so callers that only care about
"the document is bad" can catch a single type, while tooling that reports
problems back to authors can inspect the line number and indentation details.

Examples
--------
>>> from folio_content.errors import StructuralError
>>> err = StructuralError("unexpected indentation", line_number=4,
...                       expected_indent=2, actual_indent=6)
>>> str(err)
'line 4: unexpected indentation (expected indent 2, got 6)'
"""

from __future__ import annotations


class ContentParseError(ValueError):
    """Base class for failures while parsing a content document."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        self.message = message
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class StructuralError(ContentParseError):
    """Raised when a line does not fit the block structure around it."""

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        expected_indent: int | None = None,
        actual_indent: int | None = None,
    ) -> None:
        self.expected_indent = expected_indent
        self.actual_indent = actual_indent
        super().__init__(message, line_number=line_number)

    def _format(self) -> str:
        text = super()._format()
        if self.expected_indent is None or self.actual_indent is None:
            return text
        return (
            f"{text} (expected indent {self.expected_indent}, "
            f"got {self.actual_indent})"
        )


class DuplicateKeyError(StructuralError):
    """Raised when a mapping repeats a key and duplicates are rejected."""

    def __init__(self, key: str, *, line_number: int | None = None) -> None:
        self.key = key
        super().__init__(f"duplicate key '{key}'", line_number=line_number)


class UnterminatedQuoteError(ContentParseError):
    """Raised when a quoted scalar or key is not closed on its line."""

    def __init__(self, quote: str, *, line_number: int | None = None) -> None:
        self.quote = quote
        super().__init__(f"unterminated {quote} quote", line_number=line_number)


class ContentDumpError(ValueError):
    """Raised when a value tree cannot be written back in the subset grammar."""


__all__ = [
    "ContentDumpError",
    "ContentParseError",
    "DuplicateKeyError",
    "StructuralError",
    "UnterminatedQuoteError",
]
