"""Parse and load the content documents behind a portfolio site.

This package reads hand-written ``content.yaml`` style documents (site
metadata, pages, blog post index, translations) with a small
indentation-based YAML-subset parser and hands the result to rendering code
either as an immutable value tree or as typed site dataclasses.

Exports
-------
- ``parse_document``: text to :class:`MappingValue` tree.
- ``dump_document``: value tree back to canonical document text.
- ``load_site_content``: file to typed :class:`SiteContent`.
- ``app`` / ``main``: the ``content`` command-line interface.

Examples
--------
>>> from folio_content import parse_document, to_python
>>> to_python(parse_document('name: "John"  # note'))
{'name': 'John'}
"""

from __future__ import annotations

from .cli import app, main
from .errors import (
    ContentDumpError,
    ContentParseError,
    DuplicateKeyError,
    StructuralError,
    UnterminatedQuoteError,
)
from .parser import ParseOptions, parse_document
from .serializer import dump_document
from .site import SiteContent, SiteContentError, load_site_content
from .values import (
    BooleanValue,
    FloatValue,
    IntegerValue,
    MappingValue,
    SequenceValue,
    StringValue,
    Value,
    to_python,
)

__all__ = [
    "BooleanValue",
    "ContentDumpError",
    "ContentParseError",
    "DuplicateKeyError",
    "FloatValue",
    "IntegerValue",
    "MappingValue",
    "ParseOptions",
    "SequenceValue",
    "SiteContent",
    "SiteContentError",
    "StringValue",
    "StructuralError",
    "UnterminatedQuoteError",
    "Value",
    "app",
    "dump_document",
    "load_site_content",
    "main",
    "parse_document",
    "to_python",
]
