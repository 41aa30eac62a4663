from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms_sites.api.v1.router import api_router
from cms_sites.core.config import settings
from cms_sites.multitenancy.deps import get_site_routing_config


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    config = get_site_routing_config()
    logger.info(
        'Site routing loaded: public_cms_path=%s, %d canonical host(s) with aliases',
        config.public_cms_path,
        len(config.hostname_aliases),
    )
    yield


app = FastAPI(
    title='CMS Sites API',
    version='0.1.0',
    openapi_url='/api/v1/openapi.json',
    docs_url='/api/v1/docs',
    redoc_url='/api/v1/redoc',
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(api_router, prefix='/api/v1')


@app.get('/')
def root() -> dict[str, str]:
    return {'service': 'cms-sites-api', 'status': 'running'}
