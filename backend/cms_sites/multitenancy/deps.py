from functools import lru_cache

from fastapi import Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from cms_sites.core.config import SiteRoutingConfig, settings
from cms_sites.db.session import get_db
from cms_sites.models.site import Site
from cms_sites.services import site_service


@lru_cache
def get_site_routing_config() -> SiteRoutingConfig:
    return settings.site_routing


def get_request_host(request: Request) -> str | None:
    """Inbound host, lowercased; stored hostnames are compared as-is."""
    host = request.headers.get('x-forwarded-host') if settings.TRUST_PROXY_HEADERS else None
    if host:
        return host.split(',')[0].strip().lower()
    host = request.headers.get('host')
    return host.strip().lower() if host else host


def get_current_site(
    request: Request,
    path: str = Query(default='/', description='Public request path to route'),
    db: Session = Depends(get_db),
    config: SiteRoutingConfig = Depends(get_site_routing_config),
) -> Site | None:
    host = get_request_host(request)
    if not host:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Missing host header')

    site = site_service.resolve_site(db, host, path, config)
    request.state.site = site
    return site


def require_current_site(site: Site | None = Depends(get_current_site)) -> Site:
    if site is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Site not found')
    return site
