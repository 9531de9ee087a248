"""Load a site content document into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ

from ..parser import parse_document
from ..values import to_python
from .blog import _build_blog_config, _build_projects
from .helpers import (
    _as_bool,
    _as_list,
    _as_mapping,
    _default_page_path,
    _optional_str,
    _require_str,
    _scalar_text,
    _string_list,
)
from .i18n import Translations
from .models import (
    I18nConfig,
    PageEntry,
    SearchConfig,
    SiteContent,
    SiteContentError,
    SiteInfo,
    SocialLink,
    ThemeConfig,
    ThemePalette,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from ..parser import ParseOptions

logger = logging.getLogger(__name__)


def load_site_content(
    path: Path, *, options: ParseOptions | None = None
) -> SiteContent:
    """Read, parse and validate the site content document at ``path``.

    Parameters
    ----------
    path : Path
        Filesystem path to the content document (for example,
        ``data/content.yaml``).
    options : ParseOptions or None, optional
        Parser policy; the default rejects duplicate keys.

    Returns
    -------
    SiteContent
        Site metadata, blog index, projects, standalone pages and
        translations.

    Raises
    ------
    FileNotFoundError
        If no file exists at ``path``.
    ContentParseError
        If the document does not follow the content grammar.
    SiteContentError
        If required sections or fields are missing or have the wrong shape.

    Examples
    --------
    >>> from pathlib import Path
    >>> content = load_site_content(Path("data/content.yaml"))  # doctest: +SKIP
    >>> content.translations.t("nav.projects")  # doctest: +SKIP
    'Projects'
    """
    if not path.exists():
        msg = f"Content file '{path}' not found."
        raise FileNotFoundError(msg)

    logger.debug("Loading site content from %s", path)
    document = parse_document(path.read_text(encoding="utf-8"), options=options)
    content = build_site_content(typ.cast("dict[str, typ.Any]", to_python(document)))
    logger.debug(
        "Loaded %d projects, %d blog posts and %d pages from %s",
        len(content.projects),
        len(content.blog.posts) if content.blog else 0,
        len(content.pages),
        path,
    )
    return content


def build_site_content(raw: typ.Mapping[str, typ.Any]) -> SiteContent:
    """Build :class:`SiteContent` from an already parsed document."""
    if "site" not in raw:
        msg = "Content document requires a 'site' section."
        raise SiteContentError(msg)
    site = _build_site_info(_as_mapping(raw["site"], "Site configuration"))
    translations = _build_translations(
        raw.get("translations"), default_language=site.i18n.default_language
    )
    return SiteContent(
        site=site,
        blog=_build_blog_config(raw.get("blog")),
        projects=_build_projects(raw.get("projects")),
        pages=_build_pages(raw.get("pages")),
        translations=translations,
    )


def _build_site_info(site: typ.Mapping[str, typ.Any]) -> SiteInfo:
    return SiteInfo(
        title=_require_str(site, "title", "Site configuration"),
        description=_optional_str(site.get("description")),
        author=_optional_str(site.get("author")),
        github_username=_optional_str(site.get("github_username")),
        theme=_build_theme_config(site.get("theme")),
        i18n=_build_i18n_config(site.get("i18n")),
        social=_build_social_links(site.get("social")),
        search=_build_search_config(site.get("search")),
    )


def _build_theme_config(payload: object) -> ThemeConfig:
    """Build the theme palettes; every key except ``default`` names a palette."""
    theme = _as_mapping(payload, "Theme configuration")
    default = _optional_str(theme.get("default")) or ThemeConfig().default
    palettes: dict[str, ThemePalette] = {}
    for name, colors in theme.items():
        if name == "default":
            continue
        match colors:
            case dict():
                palettes[name] = _build_palette(name, colors)
            case _:
                logger.warning("Skipping theme entry '%s': expected a mapping", name)
    if palettes and default not in palettes:
        msg = f"Default theme '{default}' is not defined."
        raise SiteContentError(msg)
    return ThemeConfig(default=default, palettes=palettes)


def _build_palette(name: str, payload: typ.Mapping[str, typ.Any]) -> ThemePalette:
    comments = payload.get("comments")
    comments_theme = (
        _optional_str(comments.get("theme")) if isinstance(comments, dict) else None
    )
    colors = {
        key: str(value)
        for key, value in payload.items()
        if not isinstance(value, (dict, list))
    }
    return ThemePalette(name=name, colors=colors, comments_theme=comments_theme)


def _build_i18n_config(payload: object) -> I18nConfig:
    i18n = _as_mapping(payload, "i18n configuration")
    default_language = _optional_str(i18n.get("defaultLanguage")) or "en"
    available = _string_list(i18n.get("availableLanguages")) or [default_language]
    if default_language not in available:
        msg = (
            f"Default language '{default_language}' is not listed in "
            "'availableLanguages'."
        )
        raise SiteContentError(msg)
    return I18nConfig(default_language=default_language, available_languages=available)


def _build_social_links(payload: object) -> list[SocialLink]:
    links: list[SocialLink] = []
    for entry in _as_list(payload, "Social links"):
        match entry:
            case {"icon": icon, "url": url} if icon and url:
                links.append(
                    SocialLink(
                        icon=str(icon),
                        url=str(url),
                        label=_optional_str(entry.get("label")),
                    )
                )
            case _:
                logger.warning("Skipping social link without 'icon' and 'url': %r", entry)
    return links


def _build_search_config(payload: object) -> SearchConfig:
    search = _as_mapping(payload, "Search configuration")
    return SearchConfig(
        enabled=_as_bool(search.get("enabled"), default=True),
        placeholder=_optional_str(search.get("placeholder")),
    )


def _build_pages(payload: object) -> dict[str, PageEntry]:
    pages: dict[str, PageEntry] = {}
    for key, entry in _as_mapping(payload, "Pages").items():
        fallback_title = key.replace("-", " ").title()
        match entry:
            case dict():
                pages[key] = PageEntry(
                    key=key,
                    title=_optional_str(entry.get("title")) or fallback_title,
                    path=_optional_str(entry.get("file")) or _default_page_path(key),
                )
            case str():
                pages[key] = PageEntry(
                    key=key,
                    title=_optional_str(entry) or fallback_title,
                    path=_default_page_path(key),
                )
            case _:
                logger.warning("Skipping page '%s': expected a mapping or title", key)
    return pages


def _build_translations(payload: object, *, default_language: str) -> Translations:
    catalogs: dict[str, dict[str, str]] = {}
    for language, messages in _as_mapping(payload, "Translations").items():
        entries = _as_mapping(messages, f"Translations for '{language}'")
        catalogs[language] = {
            key: _scalar_text(text)
            for key, text in entries.items()
            if not isinstance(text, (dict, list))
        }
    return Translations(default_language=default_language, catalogs=catalogs)


__all__ = ["build_site_content", "load_site_content"]
