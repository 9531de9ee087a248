"""Write value trees back out in the content subset grammar.

The output is canonical: two-space indentation, block sequences, ``[]`` for
an empty sequence and a bare ``key:`` for an empty mapping. Strings are only
quoted when the plain form would read back as something else, so
``parse_document(dump_document(tree)) == tree`` holds for every tree the
grammar can express.

Examples
--------
>>> from folio_content.parser import parse_document
>>> from folio_content.serializer import dump_document
>>> print(dump_document(parse_document('tags: ["a", "b"]\\nflag: "true"')), end="")
tags:
  - a
  - b
flag: "true"
"""

from __future__ import annotations

import decimal
import math

from .errors import ContentDumpError
from .parser.blocks import SEQUENCE_MARKER
from .parser.scalars import coerce_scalar, find_mapping_colon
from .values import (
    BooleanValue,
    FloatValue,
    IntegerValue,
    MappingValue,
    SequenceValue,
    StringValue,
    Value,
)

INDENT_WIDTH = len(SEQUENCE_MARKER)
_RESERVED_CHARS = frozenset("\"'#")
_KEY_RESERVED_CHARS = _RESERVED_CHARS | frozenset("[]:")


def dump_document(document: MappingValue) -> str:
    """Serialize a root mapping to document text ending with a newline.

    Raises
    ------
    ContentDumpError
        If the root is not a mapping, or a key or string cannot be written in
        the subset grammar (embedded newlines, both quote kinds, empty keys),
        or a float is not finite.
    """
    if not isinstance(document, MappingValue):
        msg = f"Document root must be a mapping, got {type(document).__name__}."
        raise ContentDumpError(msg)
    lines = _mapping_lines(document, 0)
    return "".join(f"{line}\n" for line in lines)


def _mapping_lines(mapping: MappingValue, indent: int) -> list[str]:
    pad = " " * indent
    lines: list[str] = []
    for key, child in mapping.entries:
        head = f"{pad}{_format_key(key)}:"
        match child:
            case MappingValue() if child.entries:
                lines.append(head)
                lines.extend(_mapping_lines(child, indent + INDENT_WIDTH))
            case MappingValue():
                lines.append(head)
            case SequenceValue() if child.items:
                lines.append(head)
                lines.extend(_sequence_lines(child, indent + INDENT_WIDTH))
            case SequenceValue():
                lines.append(f"{head} []")
            case _:
                lines.append(f"{head} {_format_scalar(child)}")
    return lines


def _sequence_lines(sequence: SequenceValue, indent: int) -> list[str]:
    pad = " " * indent
    lines: list[str] = []
    for item in sequence.items:
        match item:
            case MappingValue() if item.entries:
                # The first key shares the dash line; the rest align with it.
                nested = _mapping_lines(item, indent + INDENT_WIDTH)
                lines.append(f"{pad}{SEQUENCE_MARKER}{nested[0].lstrip(' ')}")
                lines.extend(nested[1:])
            case MappingValue():
                lines.append(f"{pad}{SEQUENCE_MARKER.strip()}")
            case SequenceValue() if item.items:
                lines.append(f"{pad}{SEQUENCE_MARKER.strip()}")
                lines.extend(_sequence_lines(item, indent + INDENT_WIDTH))
            case SequenceValue():
                lines.append(f"{pad}{SEQUENCE_MARKER}[]")
            case _:
                lines.append(f"{pad}{SEQUENCE_MARKER}{_format_scalar(item)}")
    return lines


def _format_scalar(value: Value) -> str:
    match value:
        case BooleanValue(value=flag):
            return "true" if flag else "false"
        case IntegerValue(value=number):
            return str(number)
        case FloatValue(value=number):
            return _format_float(number)
        case StringValue(value=text):
            return _format_string(text)
        case _:
            msg = f"Cannot write {type(value).__name__} as a scalar."
            raise ContentDumpError(msg)


def _format_float(number: float) -> str:
    if not math.isfinite(number):
        msg = f"Cannot write non-finite float {number!r}."
        raise ContentDumpError(msg)
    text = repr(number)
    if "e" in text:
        text = format(decimal.Decimal(text), "f")
    if "." not in text:
        text = f"{text}.0"
    return text


def _format_string(text: str) -> str:
    _check_single_line(text)
    if _is_plain(text):
        return text
    return _quote(text)


def _format_key(key: str) -> str:
    if not key:
        msg = "Cannot write an empty mapping key."
        raise ContentDumpError(msg)
    _check_single_line(key)
    plain = (
        key == key.strip()
        and not key.startswith("-")
        and not any(char in _KEY_RESERVED_CHARS for char in key)
    )
    return key if plain else _quote(key)


def _is_plain(text: str) -> bool:
    """Return True when ``text`` reads back unchanged without quotes."""
    if not text or text != text.strip():
        return False
    if any(char in _RESERVED_CHARS for char in text):
        return False
    if text.startswith("[") or text == SEQUENCE_MARKER.strip():
        return False
    if text.startswith(SEQUENCE_MARKER):
        return False
    if find_mapping_colon(text) is not None:
        return False
    return isinstance(coerce_scalar(text), StringValue)


def _check_single_line(text: str) -> None:
    if "\n" in text:
        msg = f"Cannot write text containing a newline: {text!r}."
        raise ContentDumpError(msg)


def _quote(text: str) -> str:
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    msg = f"Cannot write text containing both quote characters: {text!r}."
    raise ContentDumpError(msg)


__all__ = ["INDENT_WIDTH", "dump_document"]
