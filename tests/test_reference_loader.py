"""Cross-check the content parser against a full YAML loader.

Every document here stays inside the content grammar, so ruamel.yaml's safe
loader must produce the same plain data as ``to_python(parse_document(...))``.
"""

from __future__ import annotations

import io
import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from ruamel.yaml import YAML

from folio_content.parser import parse_document
from folio_content.serializer import dump_document
from folio_content.values import to_python

CONTENT_PATH = Path(__file__).resolve().parents[1] / "data" / "content.yaml"

DOCUMENTS = [
    "name: John\nage: 30",
    'tags: ["JavaScript", "Python"]',
    "items:\n  - one\n  - two\n  - three",
    "users:\n  - name: John\n    age: 30\n  - name: Jane\n    age: 25",
    '# comment\nname: "John"  # note\nenabled: true\nratio: 0.5',
    dedent(
        """
        site:
          theme:
            dark:
              primary: "#10B981"
              comments:
                theme: dark
          social:
            - icon: fab fa-github
              url: https://github.com/example
        translations:
          en:
            "nav.projects": Projects
        """
    ),
    dedent(
        """
        matrix:
          -
            - 1
            - -2
          - [3, [4, 5]]
        """
    ),
]


def _reference_load(text: str) -> typ.Any:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader.load(io.StringIO(text)) or {}


@pytest.mark.parametrize("text", DOCUMENTS)
def test_parser_agrees_with_ruamel(text: str) -> None:
    """Both loaders read the same data from subset documents."""
    expected = _reference_load(text)
    actual = to_python(parse_document(text))
    assert actual == expected, f"parser disagrees with ruamel for:\n{text}"


def test_sample_content_agrees_with_ruamel() -> None:
    """The shipped sample content reads identically with both loaders."""
    text = CONTENT_PATH.read_text(encoding="utf-8")
    assert to_python(parse_document(text)) == _reference_load(text)


@pytest.mark.parametrize("text", DOCUMENTS)
def test_canonical_output_is_valid_yaml(text: str) -> None:
    """Canonical output is also read correctly by a full YAML loader."""
    document = parse_document(text)
    assert _reference_load(dump_document(document)) == to_python(document)
