"""Classify and convert single scalar tokens.

A token reaching :func:`coerce_scalar` is already trimmed and free of
comments. The checks run in a fixed priority order: quoted string, inline
array (text wrapped in ``[`` and ``]``), boolean, integer, float, and finally
plain text. Text that only starts with ``[`` is plain text.

Examples
--------
>>> from folio_content.parser.scalars import coerce_scalar
>>> coerce_scalar("30")
IntegerValue(value=30)
>>> coerce_scalar('"true"')
StringValue(value='true')
>>> coerce_scalar("[1, two]")
SequenceValue(items=(IntegerValue(value=1), StringValue(value='two')))
"""

from __future__ import annotations

import re

from ..errors import StructuralError
from ..values import (
    BooleanValue,
    FloatValue,
    IntegerValue,
    SequenceValue,
    StringValue,
    Value,
)
from .lines import QUOTE_CHARS, scan_unquoted
from .models import DEFAULT_OPTIONS, ParseOptions

INTEGER_PATTERN = re.compile(r"-?[0-9]+")
FLOAT_PATTERN = re.compile(r"-?[0-9]+\.[0-9]+")
BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}


def is_quoted(text: str) -> bool:
    """Return True when ``text`` is wrapped in a matching pair of quotes."""
    return len(text) >= 2 and text[0] in QUOTE_CHARS and text[-1] == text[0]


def unquote(text: str) -> str:
    """Strip one pair of wrapping quotes from ``text`` when present."""
    return text[1:-1] if is_quoted(text) else text


def split_inline_array(text: str, *, line_number: int | None = None) -> list[str]:
    """Split ``[a, b, c]`` into trimmed element texts.

    Commas inside quotes or nested brackets do not split.

    Raises
    ------
    StructuralError
        If the closing bracket is missing, nested brackets do not balance, or
        an element is empty.
    """
    if not text.endswith("]"):
        msg = "inline array is missing its closing ']'"
        raise StructuralError(msg, line_number=line_number)
    inner = text[1:-1]
    if not inner.strip():
        return []

    elements: list[str] = []
    depth = 0
    start = 0
    for index, char in scan_unquoted(inner, line_number=line_number):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                msg = "unbalanced ']' in inline array"
                raise StructuralError(msg, line_number=line_number)
        elif char == "," and depth == 0:
            elements.append(inner[start:index].strip())
            start = index + 1
    if depth:
        msg = "unbalanced '[' in inline array"
        raise StructuralError(msg, line_number=line_number)
    elements.append(inner[start:].strip())

    if not all(elements):
        msg = "empty element in inline array"
        raise StructuralError(msg, line_number=line_number)
    return elements


def find_mapping_colon(
    text: str, *, line_number: int | None = None, require_space: bool = True
) -> int | None:
    """Return the index of the colon separating a key from its value.

    A colon outside quotes and brackets that is followed by whitespace or ends
    the text wins, so ``https://example.com`` is not a mapping line. With
    ``require_space=False`` the first colon outside quotes and brackets is
    used when no such colon exists, which reads ``title:Hello`` as a key.
    """
    depth = 0
    first: int | None = None
    for index, char in scan_unquoted(text, line_number=line_number):
        if char == "[":
            depth += 1
        elif char == "]":
            depth = max(depth - 1, 0)
        elif char == ":" and depth == 0:
            following = text[index + 1 : index + 2]
            if not following or following.isspace():
                return index
            if first is None:
                first = index
    return None if require_space else first


def coerce_scalar(
    text: str,
    *,
    line_number: int | None = None,
    options: ParseOptions = DEFAULT_OPTIONS,
    depth: int = 1,
) -> Value:
    """Convert a trimmed scalar token into a typed value.

    Parameters
    ----------
    text : str
        Scalar text with surrounding whitespace and comments already removed.
    line_number : int or None, optional
        Source line used when reporting malformed inline arrays.
    options : ParseOptions, optional
        Supplies the nesting limit applied to inline arrays.
    depth : int, optional
        Nesting level the value sits at; each inline array adds one.

    Returns
    -------
    Value
        A :class:`StringValue`, :class:`BooleanValue`, :class:`IntegerValue`,
        :class:`FloatValue`, or a :class:`SequenceValue` for inline arrays.

    Raises
    ------
    StructuralError
        If an inline array is malformed or nested beyond ``options.max_depth``.
    """
    if is_quoted(text):
        return StringValue(text[1:-1])
    if text.startswith("[") and text.endswith("]"):
        if depth > options.max_depth:
            msg = f"nesting exceeds the maximum depth of {options.max_depth}"
            raise StructuralError(msg, line_number=line_number)
        elements = split_inline_array(text, line_number=line_number)
        return SequenceValue(
            tuple(
                coerce_scalar(
                    element, line_number=line_number, options=options, depth=depth + 1
                )
                for element in elements
            )
        )
    if text in BOOLEAN_LITERALS:
        return BooleanValue(BOOLEAN_LITERALS[text])
    if INTEGER_PATTERN.fullmatch(text):
        return IntegerValue(int(text))
    if FLOAT_PATTERN.fullmatch(text):
        return FloatValue(float(text))
    return StringValue(text)


__all__ = [
    "coerce_scalar",
    "find_mapping_colon",
    "is_quoted",
    "split_inline_array",
    "unquote",
]
