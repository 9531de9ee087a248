"""Cyclopts CLI entrypoint for inspecting site content documents.

The ``content`` console script defined here validates content documents,
prints them in other formats and looks up translations. Typical usage is
running ``content check`` in CI so a malformed ``content.yaml`` fails the build
with the offending line number instead of producing a broken site.

Examples
--------
Validate the default content document:

>>> from folio_content.cli import main
>>> main()  # doctest: +SKIP

Print a document as JSON:

>>> from folio_content.cli import app
>>> app(["dump", "data/content.yaml", "--format", "json"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml import YAML

from ._constants import DEFAULT_CONTENT_PATH, OUTPUT_FORMATS, OutputFormat
from .errors import ContentParseError
from .parser import DuplicateKeyPolicy, ParseOptions, parse_document
from .serializer import dump_document
from .site import SiteContentError, load_site_content
from .values import MappingValue, to_python

app = App(name="content", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

DuplicateKeysOption = typ.Annotated[
    DuplicateKeyPolicy,
    Parameter(
        help="How to treat a repeated mapping key (error or overwrite)",
        env_var="INPUT_DUPLICATE_KEYS",
    ),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _report(path: Path, exc: Exception) -> None:
    print(f"error: {_format_path(path)}: {exc}", file=sys.stderr)


def _read_document(path: Path, options: ParseOptions) -> MappingValue:
    """Parse the document stored at ``path``."""
    if not path.exists():
        msg = "file not found"
        raise FileNotFoundError(msg)
    return parse_document(path.read_text(encoding="utf-8"), options=options)


@app.command(help="Parse content documents and report the first error in each.")
def check(
    *paths: Path,
    duplicate_keys: DuplicateKeysOption = "error",
) -> None:
    """Validate one or more content documents.

    Parameters
    ----------
    *paths : Path
        Documents to parse; defaults to ``data/content.yaml``.
    duplicate_keys : {"error", "overwrite"}, optional
        Duplicate-key policy (overridable via ``INPUT_DUPLICATE_KEYS``).

    Returns
    -------
    None
        Prints ``ok <path> (<n> keys)`` for each valid document.

    Raises
    ------
    SystemExit
        With status 1 when any document fails to parse. Every document is
        checked before exiting.
    """
    options = ParseOptions(duplicate_keys=duplicate_keys)
    failed = False
    for path in paths or (DEFAULT_CONTENT_PATH,):
        try:
            document = _read_document(path, options)
        except (FileNotFoundError, ContentParseError) as exc:
            _report(path, exc)
            failed = True
            continue
        print(f"ok {_format_path(path)} ({len(document)} keys)")
    if failed:
        raise SystemExit(1)


@app.command(help="Print a parsed content document as JSON, YAML or canonical text.")
def dump(
    path: Path = DEFAULT_CONTENT_PATH,
    *,
    output_format: typ.Annotated[
        OutputFormat,
        Parameter(
            name="--format", help=f"Output format ({', '.join(OUTPUT_FORMATS)})"
        ),
    ] = "json",
    duplicate_keys: DuplicateKeysOption = "error",
) -> None:
    """Write the parsed form of ``path`` to stdout.

    ``json`` and ``yaml`` print the plain-container projection; ``canonical``
    re-serializes the value tree in the content grammar itself.
    """
    try:
        document = _read_document(path, ParseOptions(duplicate_keys=duplicate_keys))
    except (FileNotFoundError, ContentParseError) as exc:
        _report(path, exc)
        raise SystemExit(1) from exc

    match output_format:
        case "json":
            print(json.dumps(to_python(document), indent=2, ensure_ascii=False))
        case "yaml":
            yaml = YAML()
            yaml.default_flow_style = False
            yaml.indent(mapping=2, sequence=4, offset=2)
            yaml.dump(to_python(document), sys.stdout)
        case "canonical":
            sys.stdout.write(dump_document(document))


@app.command(help="Look up a translated message in the site content.")
def translate(
    key: str,
    *,
    lang: typ.Annotated[
        str | None, Parameter(help="Language code; defaults to the site default")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site content", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONTENT_PATH,
    duplicate_keys: DuplicateKeysOption = "error",
) -> None:
    """Print the translation for ``key``, or the key itself when missing."""
    try:
        content = load_site_content(
            config, options=ParseOptions(duplicate_keys=duplicate_keys)
        )
    except (FileNotFoundError, ContentParseError, SiteContentError) as exc:
        _report(config, exc)
        raise SystemExit(1) from exc
    print(content.translations.t(key, lang))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``content`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
