"""Typed dataclasses describing a portfolio site's content document."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata

from .i18n import Translations


class SiteContentError(ValueError):
    """Raised when the content document is missing required fields."""


@dc.dataclass(slots=True)
class ThemePalette:
    """Named colour scheme, for example ``dark`` or ``light``."""

    name: str
    colors: dict[str, str] = dc.field(default_factory=dict)
    comments_theme: str | None = None

    @property
    def primary(self) -> str | None:
        """Accent colour used for links and browser chrome."""
        return self.colors.get("primary")


@dc.dataclass(slots=True)
class ThemeConfig:
    """Available palettes and the one shown on first visit."""

    default: str = "dark"
    palettes: dict[str, ThemePalette] = dc.field(default_factory=dict)

    def palette(self, name: str | None = None) -> ThemePalette | None:
        """Return the named palette, or the default one when ``name`` is None."""
        return self.palettes.get(name or self.default)


@dc.dataclass(slots=True)
class I18nConfig:
    """Language negotiation settings."""

    default_language: str = "en"
    available_languages: list[str] = dc.field(default_factory=lambda: ["en"])


@dc.dataclass(slots=True)
class SocialLink:
    """Profile link rendered in the site header."""

    icon: str
    url: str
    label: str | None = None


@dc.dataclass(slots=True)
class SearchConfig:
    """Site search toggle and input placeholder."""

    enabled: bool = True
    placeholder: str | None = None


@dc.dataclass(slots=True)
class SiteInfo:
    """Site-wide metadata used for titles, meta tags and the header."""

    title: str
    description: str | None = None
    author: str | None = None
    github_username: str | None = None
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    i18n: I18nConfig = dc.field(default_factory=I18nConfig)
    social: list[SocialLink] = dc.field(default_factory=list)
    search: SearchConfig = dc.field(default_factory=SearchConfig)


@dc.dataclass(slots=True)
class BlogPost:
    """Entry in the blog post index."""

    title: str
    filename: str
    date: dt.date | None = None
    tags: list[str] = dc.field(default_factory=list)
    excerpt: str | None = None

    @property
    def slug(self) -> str:
        """URL identifier derived from the Markdown filename."""
        return self.filename.removesuffix(".md")


@dc.dataclass(slots=True)
class BlogConfig:
    """Blog section settings and its post index."""

    title: str = "Blog"
    show_in_nav: bool = True
    posts_per_page: int = 5
    posts: list[BlogPost] = dc.field(default_factory=list)

    def sorted_posts(self) -> list[BlogPost]:
        """Return posts newest first; undated posts sort last."""
        return sorted(
            self.posts,
            key=lambda post: post.date or dt.date.min,
            reverse=True,
        )

    def get_post(self, slug: str) -> BlogPost:
        """Return the post whose slug matches ``slug``."""
        for post in self.posts:
            if post.slug == slug:
                return post
        available = ", ".join(post.slug for post in self.posts)
        msg = f"Unknown blog post '{slug}'. Known posts: {available}"
        raise KeyError(msg)


@dc.dataclass(slots=True)
class ProjectConfig:
    """Showcased project."""

    id: str
    title: str
    description: str | None = None
    tags: list[str] = dc.field(default_factory=list)
    github_repo: str | None = None
    demo_url: str | None = None
    youtube_videos: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class PageEntry:
    """Standalone Markdown page such as ``about``."""

    key: str
    title: str
    path: str


@dc.dataclass(slots=True)
class SiteContent:
    """Everything the site renders, sourced from the content document."""

    site: SiteInfo
    blog: BlogConfig | None = None
    projects: list[ProjectConfig] = dc.field(default_factory=list)
    pages: dict[str, PageEntry] = dc.field(default_factory=dict)
    translations: Translations = dc.field(default_factory=Translations)

    def get_project(self, project_id: str) -> ProjectConfig:
        """Return the project with the given identifier."""
        for project in self.projects:
            if project.id == project_id:
                return project
        available = ", ".join(project.id for project in self.projects)
        msg = f"Unknown project '{project_id}'. Known projects: {available}"
        raise KeyError(msg)


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
]
