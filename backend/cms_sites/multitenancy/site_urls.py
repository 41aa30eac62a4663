import re

from cms_sites.core.config import SiteRoutingConfig
from cms_sites.multitenancy.site_resolution import RoutableSite


def site_path(site: RoutableSite, config: SiteRoutingConfig) -> str:
    parts = [part for part in ('/', config.public_cms_path or '/', site.path) if part is not None]
    path = re.sub(r'/{2,}', '/', '/'.join(parts))
    return path[:-1] if path.endswith('/') else path


def compose_url(site: RoutableSite, config: SiteRoutingConfig, *, relative: bool = False) -> str | None:
    """
    Canonical URL of a site: `//host/prefix/path`, or just the path when `relative`.

    A relative URL for a root site mounted at '/' reduces to nothing and is
    returned as None; callers treat that as '/'.
    """
    path = site_path(site, config)
    if relative:
        return path or None
    return f'//{site.hostname}{path}'
