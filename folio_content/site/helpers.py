"""Utility helpers shared by the site content builders."""

from __future__ import annotations

import datetime as dt
import typing as typ

from .models import SiteContentError

DEFAULT_PAGE_DIR = "pages"


def _scalar_text(value: object) -> str:
    """Return ``value`` as authored text, keeping ``true``/``false`` lowercase."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty.

    A bare ``key:`` parses to an empty mapping and counts as unset; any other
    mapping or list is not text and is rejected.
    """
    match value:
        case None:
            return None
        case dict() | list() if not value:
            return None
        case dict() | list():
            kind = "mapping" if isinstance(value, dict) else "list"
            msg = f"Expected a text value, got a {kind}."
            raise SiteContentError(msg)
    text = _scalar_text(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, context: str) -> str:
    """Return ``payload[key]`` as text or raise when it is missing or blank."""
    text = _optional_str(payload.get(key))
    if text is None:
        msg = f"{context} requires a '{key}'."
        raise SiteContentError(msg)
    return text


def _as_mapping(value: object, context: str) -> dict[str, typ.Any]:
    """Return ``value`` as a dict, treating None as empty."""
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"{context} must be a mapping."
            raise SiteContentError(msg)


def _as_list(value: object, context: str) -> list[typ.Any]:
    """Return ``value`` as a list, treating None as empty."""
    match value:
        case None:
            return []
        case list():
            return value
        case _:
            msg = f"{context} must be a list."
            raise SiteContentError(msg)


def _string_list(value: str | list[object] | None) -> list[str]:
    """Normalize a tag list or comma-separated string into non-empty strings."""
    if isinstance(value, str):
        return [segment.strip() for segment in value.split(",") if segment.strip()]
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = _scalar_text(segment).strip()
            if text:
                normalized.append(text)
        return normalized
    return []


def _as_bool(value: object, *, default: bool) -> bool:
    """Return a boolean flag, falling back to ``default`` when unset."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    msg = f"Expected true or false, got {value!r}."
    raise SiteContentError(msg)


def _as_int(value: object, *, default: int) -> int:
    """Return a whole number, falling back to ``default`` when unset."""
    if value is None:
        return default
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    msg = f"Expected a whole number, got {value!r}."
    raise SiteContentError(msg)


def _parse_date(value: dt.date | str | None) -> dt.date | None:
    """Return a date parsed from an ISO ``YYYY-MM-DD`` string, or None."""
    match value:
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            try:
                return dt.date.fromisoformat(sanitized[:10])
            except ValueError:
                return None
        case _:
            return None


def _default_page_path(key: str) -> str:
    """Return the Markdown path used for a page without an explicit file."""
    return f"{DEFAULT_PAGE_DIR}/{key}.md"


__all__ = [
    "DEFAULT_PAGE_DIR",
    "_as_bool",
    "_as_int",
    "_as_list",
    "_as_mapping",
    "_default_page_path",
    "_optional_str",
    "_parse_date",
    "_require_str",
    "_scalar_text",
    "_string_list",
]
