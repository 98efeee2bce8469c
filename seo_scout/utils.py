# File: seo_scout/utils.py
"""seo_scout.utils: URL helpers shared by the crawler, the analyzer and the sitemap builder."""

from __future__ import annotations

from typing import List, Optional, Sequence
from urllib.parse import urljoin, urlsplit, urlunsplit

from seo_scout.logger import logger

__all__: Sequence[str] = (
    "extract_host",
    "is_absolute_url",
    "canonical_url",
    "resolve_link",
    "path_segments",
)


def extract_host(url: str) -> Optional[str]:
    """Возвращает hostname (без порта, в нижнем регистре) или None."""
    return urlsplit(url).hostname


def is_absolute_url(url: str) -> bool:
    """True, если URL имеет схему http(s) и хост."""
    try:
        parsed = urlsplit(url)
        return parsed.scheme in ("http", "https") and bool(parsed.hostname)
    except ValueError:
        return False


DEFAULT_PORTS = {"http": 80, "https": 443}


def canonical_url(url: str) -> str:
    """Каноническая форма URL для сравнения и дедупликации.

    Scheme and host are lower-cased, the default port is dropped and an empty
    path becomes ``/``: ``HTTP://Example.COM:80`` → ``http://example.com/``.
    Raises :class:`ValueError` for a malformed port or a missing host.
    """
    parsed = urlsplit(url)
    scheme = parsed.scheme.lower()
    host = parsed.hostname
    if not host:
        raise ValueError(f"no host in {url!r}")
    port = parsed.port
    netloc = f"[{host}]" if ":" in host else host
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        netloc = f"{netloc}:{port}"
    if parsed.username is not None:
        userinfo = parsed.username
        if parsed.password is not None:
            userinfo = f"{userinfo}:{parsed.password}"
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit((scheme, netloc, parsed.path or "/", parsed.query, parsed.fragment))


def resolve_link(href: str, base_url: str) -> str:
    """Resolve *href* against *base_url* and return its :func:`canonical_url`.

    Raises :class:`ValueError` when the result is not a usable absolute URL
    (bad IPv6 literal, invalid port, no host, ...).
    """
    return canonical_url(urljoin(base_url, href.strip()))


def path_segments(url: str) -> List[str]:
    """Непустые сегменты пути URL: ``https://a.com/x//y/`` → ``['x', 'y']``."""
    segments = [s for s in urlsplit(url).path.split("/") if s]
    logger.debug("Path segments of %s: %s", url, segments)
    return segments
