r"""Split a content document into indented, comment-free lines.

The block parser never looks at raw text: it receives the
:class:`~folio_content.parser.models.SourceLine` records produced here, each
holding the indentation width, the significant text and the original line
number.

Example
-------
>>> from folio_content.parser.lines import normalize_lines
>>> [line.content for line in normalize_lines("# intro\nname: John  # note\n")]
['name: John']
"""

from __future__ import annotations

import collections.abc as cabc

from ..errors import StructuralError, UnterminatedQuoteError
from .models import SourceLine

QUOTE_CHARS = frozenset("\"'")
COMMENT_CHAR = "#"
_TOKEN_OPENERS = frozenset("[,")
_SPACED_OPENERS = frozenset(":-[,")
_WHITESPACE = frozenset(" \t")


def scan_unquoted(
    text: str, *, line_number: int | None = None
) -> cabc.Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for every character of ``text`` outside quotes.

    A quote character only opens a quoted run at the start of a token: at the
    beginning of ``text``, straight after ``[`` or ``,``, or after whitespace
    that follows ``:``, ``-``, ``[`` or ``,``. Elsewhere (``it's``) it is plain
    text. Backslashes carry no meaning.

    Raises
    ------
    UnterminatedQuoteError
        If the scan reaches the end of ``text`` inside a quoted run. Callers
        that stop iterating early never see this error.
    """
    quote: str | None = None
    token_start = True
    previous = ""
    for index, char in enumerate(text):
        if quote is not None:
            if char == quote:
                quote = None
                token_start = False
            previous = char
            continue
        if char in QUOTE_CHARS and token_start:
            quote = char
            previous = char
            continue
        yield index, char
        if char in _TOKEN_OPENERS:
            token_start = True
        elif char in _WHITESPACE:
            token_start = token_start or previous in _SPACED_OPENERS
        else:
            token_start = False
        previous = char
    if quote is not None:
        raise UnterminatedQuoteError(quote, line_number=line_number)


def strip_comment(text: str, *, line_number: int | None = None) -> str:
    """Return ``text`` truncated at the first ``#`` outside quotes, right-trimmed."""
    for index, char in scan_unquoted(text, line_number=line_number):
        if char == COMMENT_CHAR:
            return text[:index].rstrip()
    return text.rstrip()


def normalize_lines(text: str) -> list[SourceLine]:
    r"""Convert document text into significant :class:`SourceLine` records.

    Parameters
    ----------
    text : str
        Whole document. ``\r\n`` endings and a leading byte-order mark are
        accepted.

    Returns
    -------
    list[SourceLine]
        One record per line that still has content after comment removal, in
        document order.

    Raises
    ------
    StructuralError
        If a line is indented with a tab.
    UnterminatedQuoteError
        If a quote opened on a line is not closed before the line ends.
    """
    records: list[SourceLine] = []
    for number, raw in enumerate(text.removeprefix("\ufeff").split("\n"), start=1):
        body = raw.lstrip(" ")
        content = strip_comment(body, line_number=number)
        if not content.strip():
            continue
        indent = len(raw) - len(body)
        if content[0].isspace():
            msg = "indentation must use spaces, not tabs"
            raise StructuralError(msg, line_number=number)
        records.append(SourceLine(indent=indent, content=content, line_number=number))
    return records


__all__ = [
    "COMMENT_CHAR",
    "QUOTE_CHARS",
    "normalize_lines",
    "scan_unquoted",
    "strip_comment",
]
