from fastapi import APIRouter, Depends

from cms_sites.api.deps import require_site_admin
from cms_sites.api.v1.endpoints import health, site_context, sites


api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(site_context.router)
api_router.include_router(sites.router, dependencies=[Depends(require_site_admin)])
