from fastapi import APIRouter, Depends, Request

from cms_sites.core.config import SiteRoutingConfig
from cms_sites.models.site import Site
from cms_sites.multitenancy.deps import get_request_host, get_site_routing_config, require_current_site
from cms_sites.multitenancy.site_urls import compose_url
from cms_sites.schemas.site import SiteContextOut, SiteOut


router = APIRouter(prefix='/site-context', tags=['site-context'])


@router.get('', response_model=SiteContextOut)
def get_site_context(
    request: Request,
    site: Site = Depends(require_current_site),
    config: SiteRoutingConfig = Depends(get_site_routing_config),
) -> SiteContextOut:
    out = SiteOut.model_validate(site)
    out.url = compose_url(site, config)
    return SiteContextOut(
        site=out,
        host=get_request_host(request) or '',
        path=request.query_params.get('path', '/'),
    )
