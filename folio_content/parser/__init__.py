r"""Parser for the indentation-based YAML subset used by site content files.

The pipeline has three stages: :mod:`.lines` normalizes raw text into
indented, comment-free records, :mod:`.blocks` builds mappings and sequences
from them by recursive descent, and :mod:`.scalars` types each leaf. The
public entry point is :func:`parse_document`.

Examples
--------
>>> from folio_content.parser import parse_document
>>> doc = parse_document("name: John\nage: 30")
>>> doc["age"]
IntegerValue(value=30)
"""

from .blocks import parse_block
from .document import parse_document
from .lines import normalize_lines
from .models import DEFAULT_OPTIONS, DuplicateKeyPolicy, ParseOptions, SourceLine
from .scalars import coerce_scalar

__all__ = [
    "DEFAULT_OPTIONS",
    "DuplicateKeyPolicy",
    "ParseOptions",
    "SourceLine",
    "coerce_scalar",
    "normalize_lines",
    "parse_block",
    "parse_document",
]
