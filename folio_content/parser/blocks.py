"""Recursive-descent block parser.

Every function here takes the normalized line list together with an explicit
index and returns the index of the first line it did not consume, so parsing
carries no hidden state between calls. A block is the run of lines starting
at ``lines[start]`` whose indentation is at least that of the first line; it
is a sequence when the first line is a ``- `` item and a mapping otherwise.
"""

from __future__ import annotations

import typing as typ

from ..errors import DuplicateKeyError, StructuralError
from ..values import MappingValue, SequenceValue, Value
from .models import DEFAULT_OPTIONS, ParseOptions
from .scalars import coerce_scalar, find_mapping_colon, unquote

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import SourceLine

SEQUENCE_MARKER = "- "


def is_sequence_item(content: str) -> bool:
    """Return True when ``content`` is a ``- `` item or a bare ``-``."""
    return content == SEQUENCE_MARKER.strip() or content.startswith(SEQUENCE_MARKER)


def parse_block(
    lines: cabc.Sequence[SourceLine],
    start: int,
    *,
    options: ParseOptions = DEFAULT_OPTIONS,
    depth: int = 1,
) -> tuple[Value, int]:
    """Parse the block that begins at ``lines[start]``.

    Parameters
    ----------
    lines : Sequence[SourceLine]
        Normalized document lines.
    start : int
        Index of the first line of the block.
    options : ParseOptions, optional
        Duplicate-key policy and nesting limit.
    depth : int, optional
        Nesting level of this block; the document root is level 1.

    Returns
    -------
    tuple[Value, int]
        The parsed :class:`MappingValue` or :class:`SequenceValue` and the
        index of the first line after the block.

    Raises
    ------
    StructuralError
        If a line is indented deeper than its block allows, does not match
        the block's kind, or the nesting limit is exceeded.
    """
    first = lines[start]
    _check_depth(first, depth, options)
    if is_sequence_item(first.content):
        return _parse_sequence(lines, start, first.indent, options, depth)
    return _parse_mapping(lines, start, first.indent, options, depth, {})


def _check_depth(line: SourceLine, depth: int, options: ParseOptions) -> None:
    if depth > options.max_depth:
        msg = f"nesting exceeds the maximum depth of {options.max_depth}"
        raise StructuralError(msg, line_number=line.line_number)


def _check_alignment(line: SourceLine, indent: int) -> None:
    if line.indent > indent:
        msg = "unexpected indentation"
        raise StructuralError(
            msg,
            line_number=line.line_number,
            expected_indent=indent,
            actual_indent=line.indent,
        )


def _parse_nested(
    lines: cabc.Sequence[SourceLine],
    index: int,
    parent_indent: int,
    options: ParseOptions,
    depth: int,
) -> tuple[Value, int]:
    """Parse the block opened by a bare ``key:`` or ``-`` line.

    Without a deeper line to follow, the opener holds an empty mapping.
    """
    if index < len(lines) and lines[index].indent > parent_indent:
        return parse_block(lines, index, options=options, depth=depth + 1)
    return MappingValue(), index


def _parse_sequence(
    lines: cabc.Sequence[SourceLine],
    index: int,
    indent: int,
    options: ParseOptions,
    depth: int,
) -> tuple[SequenceValue, int]:
    items: list[Value] = []
    while index < len(lines):
        line = lines[index]
        if line.indent < indent:
            break
        _check_alignment(line, indent)
        if not is_sequence_item(line.content):
            msg = "expected a '- ' sequence item"
            raise StructuralError(
                msg,
                line_number=line.line_number,
                expected_indent=indent,
                actual_indent=line.indent,
            )

        rest = line.content[1:].lstrip(" ")
        colon = find_mapping_colon(rest, line_number=line.line_number)
        if not rest:
            value, index = _parse_nested(lines, index + 1, indent, options, depth)
        elif colon is not None:
            # Keys after the first one line up with the text following "- ".
            key_indent = indent + len(line.content) - len(rest)
            _check_depth(line, depth + 1, options)
            entries: dict[str, Value] = {}
            index = _read_entry(
                lines, index, rest, colon, key_indent, entries, options, depth + 1
            )
            value, index = _parse_mapping(
                lines, index, key_indent, options, depth + 1, entries
            )
        else:
            value = coerce_scalar(
                rest, line_number=line.line_number, options=options, depth=depth + 1
            )
            index += 1
        items.append(value)
    return SequenceValue(tuple(items)), index


def _parse_mapping(
    lines: cabc.Sequence[SourceLine],
    index: int,
    indent: int,
    options: ParseOptions,
    depth: int,
    entries: dict[str, Value],
) -> tuple[MappingValue, int]:
    while index < len(lines):
        line = lines[index]
        if line.indent < indent:
            break
        _check_alignment(line, indent)
        colon = None
        if not is_sequence_item(line.content):
            colon = find_mapping_colon(
                line.content, line_number=line.line_number, require_space=False
            )
        if colon is None:
            msg = "expected a 'key: value' mapping entry"
            raise StructuralError(
                msg,
                line_number=line.line_number,
                expected_indent=indent,
                actual_indent=line.indent,
            )
        index = _read_entry(
            lines, index, line.content, colon, indent, entries, options, depth
        )
    return MappingValue(tuple(entries.items())), index


def _read_entry(
    lines: cabc.Sequence[SourceLine],
    index: int,
    text: str,
    colon: int,
    indent: int,
    entries: dict[str, Value],
    options: ParseOptions,
    depth: int,
) -> int:
    """Parse one ``key: value`` entry into ``entries``; return the next index."""
    line = lines[index]
    key = unquote(text[:colon].strip())
    if not key:
        msg = "mapping key is empty"
        raise StructuralError(msg, line_number=line.line_number)

    value_text = text[colon + 1 :].strip()
    if value_text:
        value: Value = coerce_scalar(
            value_text, line_number=line.line_number, options=options, depth=depth + 1
        )
        index += 1
    else:
        value, index = _parse_nested(lines, index + 1, indent, options, depth)

    if key in entries and options.duplicate_keys == "error":
        raise DuplicateKeyError(key, line_number=line.line_number)
    entries[key] = value
    return index


__all__ = ["SEQUENCE_MARKER", "is_sequence_item", "parse_block"]
