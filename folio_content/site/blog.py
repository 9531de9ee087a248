"""Builders for the blog index and project showcase sections."""

from __future__ import annotations

import logging
import typing as typ

from .helpers import (
    _as_bool,
    _as_int,
    _as_list,
    _as_mapping,
    _optional_str,
    _parse_date,
    _require_str,
    _string_list,
)
from .models import BlogConfig, BlogPost, ProjectConfig, SiteContentError

logger = logging.getLogger(__name__)


def _build_blog_config(payload: object) -> BlogConfig | None:
    """Build the blog section from its mapping, or None when absent."""
    if payload is None:
        return None
    blog = _as_mapping(payload, "Blog configuration")
    defaults = BlogConfig()
    posts = [
        _build_post(entry, position)
        for position, entry in enumerate(_as_list(blog.get("posts"), "Blog posts"), 1)
    ]
    return BlogConfig(
        title=_optional_str(blog.get("title")) or defaults.title,
        show_in_nav=_as_bool(blog.get("showInNav"), default=defaults.show_in_nav),
        posts_per_page=_as_int(
            blog.get("postsPerPage"), default=defaults.posts_per_page
        ),
        posts=posts,
    )


def _build_post(payload: object, position: int) -> BlogPost:
    """Build one blog post entry."""
    context = f"Blog post #{position}"
    post = _as_mapping(payload, context)
    raw_date = post.get("date")
    date = _parse_date(raw_date)
    if raw_date is not None and date is None:
        logger.warning("%s has an unreadable date %r; ignoring it", context, raw_date)
    return BlogPost(
        title=_require_str(post, "title", context),
        filename=_require_str(post, "filename", context),
        date=date,
        tags=_string_list(post.get("tags")),
        excerpt=_optional_str(post.get("excerpt")),
    )


def _build_projects(payload: object) -> list[ProjectConfig]:
    """Build the project list, rejecting repeated identifiers."""
    projects: list[ProjectConfig] = []
    seen: set[str] = set()
    for position, entry in enumerate(_as_list(payload, "Projects"), 1):
        project = _build_project(entry, position)
        if project.id in seen:
            msg = f"Project id '{project.id}' is defined more than once."
            raise SiteContentError(msg)
        seen.add(project.id)
        projects.append(project)
    return projects


def _build_project(payload: object, position: int) -> ProjectConfig:
    context = f"Project #{position}"
    project: typ.Mapping[str, typ.Any] = _as_mapping(payload, context)
    return ProjectConfig(
        id=_require_str(project, "id", context),
        title=_require_str(project, "title", context),
        description=_optional_str(project.get("description")),
        tags=_string_list(project.get("tags")),
        github_repo=_optional_str(project.get("github_repo")),
        demo_url=_optional_str(project.get("demo_url")),
        youtube_videos=_string_list(project.get("youtube_videos")),
    )


__all__ = ["_build_blog_config", "_build_projects"]
