from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from cms_sites.core.config import SiteRoutingConfig


class RoutableSite(Protocol):
    hostname: str
    path: str | None


SiteT = TypeVar('SiteT', bound=RoutableSite)


def real_host_from_aliases(host: str, config: SiteRoutingConfig) -> str:
    for canonical, aliases in config.hostname_aliases:
        if host in aliases:
            return canonical
    return host


def request_path(path: str | None, config: SiteRoutingConfig) -> str:
    """Request path with the public mount prefix and any query string removed."""
    path = path or ''
    prefix = config.public_cms_path
    if path and prefix and prefix != '/' and path.startswith(prefix):
        path = path[len(prefix):]
    return path.split('?', 1)[0]


def match_site(candidates: Iterable[SiteT], path: str) -> SiteT | None:
    # Candidates must arrive in creation order: the first path-scoped match wins,
    # there is no longest-prefix ranking between sibling paths.
    fallback = None
    probe = f'{path}/'
    for site in candidates:
        if not site.path:
            fallback = site
        elif probe.startswith(f'/{site.path}/'):
            return site
    return fallback


def find_site(
    sites: Sequence[SiteT],
    host: str,
    path: str | None,
    config: SiteRoutingConfig,
) -> SiteT | None:
    if len(sites) == 1:
        return sites[0]

    canonical = real_host_from_aliases(host, config)
    candidates = (site for site in sites if site.hostname == canonical)
    return match_site(candidates, request_path(path, config))
