"""Base-path aware URL helpers for sites deployed under a subdirectory."""

from __future__ import annotations


def normalize_base(base_url: str) -> str:
    """Return the base path without its trailing slash ("/" becomes "")."""
    base = base_url.strip()
    if base and not base.startswith("/"):
        base = f"/{base}"
    return base.rstrip("/")


def url(base_url: str, path: str) -> str:
    """Prefix an internal path with the site base path.

    With a base of "/astro-demo/", "/" maps to "/astro-demo/" and
    "/lessons/1-welcome/" maps to "/astro-demo/lessons/1-welcome/".
    """
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{normalize_base(base_url)}{path}"


def lesson_path(slug: str) -> str:
    """Return the site-relative path for a lesson page."""
    return f"/lessons/{slug.strip('/')}/"
