"""Load and validate a portfolio site's content document.

This subpackage reads the site's ``content.yaml`` with the content parser and
turns the resulting tree into strongly typed dataclasses (:class:`SiteContent`,
:class:`SiteInfo`, :class:`BlogConfig`, ...) that rendering code consumes.
The primary entry point is :func:`load_site_content`; tests and tools that
already hold a parsed document can call :func:`build_site_content`.

Examples
--------
>>> from pathlib import Path
>>> from folio_content.site import load_site_content
>>> content = load_site_content(Path("data/content.yaml"))  # doctest: +SKIP
>>> content.get_project("snakeai").title  # doctest: +SKIP
'SnakeAI'
"""

from .i18n import Translations
from .loader import build_site_content, load_site_content
from .models import (
    BlogConfig,
    BlogPost,
    I18nConfig,
    PageEntry,
    ProjectConfig,
    SearchConfig,
    SiteContent,
    SiteContentError,
    SiteInfo,
    SocialLink,
    ThemeConfig,
    ThemePalette,
)

__all__ = [
    "BlogConfig",
    "BlogPost",
    "I18nConfig",
    "PageEntry",
    "ProjectConfig",
    "SearchConfig",
    "SiteContent",
    "SiteContentError",
    "SiteInfo",
    "SocialLink",
    "ThemeConfig",
    "ThemePalette",
    "Translations",
    "build_site_content",
    "load_site_content",
]
