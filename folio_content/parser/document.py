r"""Entry point turning document text into a value tree.

Example
-------
>>> from folio_content.parser import parse_document
>>> from folio_content.values import to_python
>>> to_python(parse_document("items:\n  - one\n  - two"))
{'items': ['one', 'two']}
"""

from __future__ import annotations

from ..errors import StructuralError
from ..values import MappingValue
from .blocks import is_sequence_item, parse_block
from .lines import normalize_lines
from .models import DEFAULT_OPTIONS, ParseOptions


def parse_document(text: str, *, options: ParseOptions | None = None) -> MappingValue:
    """Parse a whole content document.

    Parameters
    ----------
    text : str
        Complete document text. Callers are responsible for reading it from
        disk or elsewhere.
    options : ParseOptions or None, optional
        Parsing policy; defaults to rejecting duplicate keys.

    Returns
    -------
    MappingValue
        The root mapping. Empty and comment-only documents produce an empty
        mapping.

    Raises
    ------
    StructuralError
        If a line cannot be placed in the block structure or the root is not
        a mapping.
    UnterminatedQuoteError
        If a quote is left open at the end of a line.
    """
    if not text:
        return MappingValue()
    lines = normalize_lines(text)
    if not lines:
        return MappingValue()

    first = lines[0]
    if is_sequence_item(first.content):
        msg = "document root must be a mapping, found a sequence item"
        raise StructuralError(msg, line_number=first.line_number)

    root, index = parse_block(lines, 0, options=options or DEFAULT_OPTIONS)
    if index < len(lines):
        stray = lines[index]
        msg = "unexpected indentation"
        raise StructuralError(
            msg,
            line_number=stray.line_number,
            expected_indent=first.indent,
            actual_indent=stray.indent,
        )
    if not isinstance(root, MappingValue):  # pragma: no cover - guarded above
        msg = "document root must be a mapping"
        raise StructuralError(msg, line_number=first.line_number)
    return root


__all__ = ["parse_document"]
