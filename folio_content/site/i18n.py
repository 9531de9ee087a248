"""Translation catalogs keyed by language code."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class Translations:
    """Per-language message catalogs with key fallback.

    Examples
    --------
    >>> catalog = Translations("en", {"en": {"nav.projects": "Projects"}})
    >>> catalog.t("nav.projects")
    'Projects'
    >>> catalog.t("nav.unknown")
    'nav.unknown'
    """

    default_language: str = "en"
    catalogs: dict[str, dict[str, str]] = dc.field(default_factory=dict)

    @property
    def languages(self) -> list[str]:
        """Language codes that have a catalog, in document order."""
        return list(self.catalogs)

    def t(self, key: str, lang: str | None = None) -> str:
        """Translate ``key`` into ``lang`` (or the default language).

        The key itself is returned when the language has no catalog or the
        catalog has no non-empty message for the key.
        """
        catalog = self.catalogs.get(lang or self.default_language)
        if not catalog:
            return key
        return catalog.get(key) or key


__all__ = ["Translations"]
