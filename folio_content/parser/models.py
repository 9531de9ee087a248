"""Records and options shared by the parser stages."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

DuplicateKeyPolicy = typ.Literal["error", "overwrite"]
DUPLICATE_KEY_POLICIES: tuple[str, ...] = typ.get_args(DuplicateKeyPolicy)


@dc.dataclass(frozen=True, slots=True)
class SourceLine:
    """A non-blank, comment-stripped line of a content document.

    Attributes
    ----------
    indent : int
        Number of leading spaces on the physical line.
    content : str
        Line text with indentation, trailing comment and trailing whitespace
        removed.
    line_number : int
        1-based line number in the original document, used in error messages.
    """

    indent: int
    content: str
    line_number: int


@dc.dataclass(frozen=True, slots=True)
class ParseOptions:
    """Knobs controlling how strictly a document is read.

    Attributes
    ----------
    duplicate_keys : {"error", "overwrite"}
        ``"error"`` rejects a mapping that repeats a key. ``"overwrite"`` keeps
        the last value while the key stays at its first position.
    max_depth : int
        Deepest block nesting accepted before the document is rejected.
    """

    duplicate_keys: DuplicateKeyPolicy = "error"
    max_depth: int = 64

    def __post_init__(self) -> None:
        if self.duplicate_keys not in DUPLICATE_KEY_POLICIES:
            allowed = ", ".join(DUPLICATE_KEY_POLICIES)
            msg = (
                f"Unknown duplicate key policy '{self.duplicate_keys}'. "
                f"Expected one of: {allowed}"
            )
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be at least 1, got {self.max_depth}."
            raise ValueError(msg)


DEFAULT_OPTIONS = ParseOptions()


__all__ = [
    "DEFAULT_OPTIONS",
    "DUPLICATE_KEY_POLICIES",
    "DuplicateKeyPolicy",
    "ParseOptions",
    "SourceLine",
]
