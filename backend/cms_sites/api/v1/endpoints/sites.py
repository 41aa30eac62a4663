from typing import NoReturn
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from cms_sites.core.config import SiteRoutingConfig
from cms_sites.core.exceptions import ProvisioningFailure, SiteValidationError, UniquenessConflict
from cms_sites.db.session import get_db
from cms_sites.models.site import Site
from cms_sites.multitenancy.deps import get_site_routing_config
from cms_sites.multitenancy.site_urls import compose_url
from cms_sites.schemas.common import PaginationMeta
from cms_sites.schemas.site import SiteCreate, SiteListResponse, SiteOut, SiteUpdate, SiteUrlOut
from cms_sites.services import site_service


router = APIRouter(prefix='/sites', tags=['sites'])


def _site_out(site: Site, config: SiteRoutingConfig) -> SiteOut:
    out = SiteOut.model_validate(site)
    out.url = compose_url(site, config)
    return out


def _get_site_or_404(db: Session, site_id: UUID) -> Site:
    site = site_service.get_site(db, site_id)
    if not site:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Site not found')
    return site


def _raise_for_site_error(db: Session, exc: Exception) -> NoReturn:
    db.rollback()
    if isinstance(exc, SiteValidationError):
        raise HTTPException(
            status_code=422,
            detail={'message': str(exc), 'errors': exc.errors},
        ) from exc
    if isinstance(exc, UniquenessConflict):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={'message': str(exc), 'fields': exc.fields},
        ) from exc
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc


@router.get('', response_model=SiteListResponse)
def list_sites(
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
    config: SiteRoutingConfig = Depends(get_site_routing_config),
) -> SiteListResponse:
    sites, total = site_service.list_sites(db, page=page, page_size=page_size)
    return SiteListResponse(
        items=[_site_out(site, config) for site in sites],
        meta=PaginationMeta(page=page, page_size=page_size, total=total),
    )


@router.post('', response_model=SiteOut, status_code=status.HTTP_201_CREATED)
def create_site(
    payload: SiteCreate,
    db: Session = Depends(get_db),
    config: SiteRoutingConfig = Depends(get_site_routing_config),
) -> SiteOut:
    try:
        site = site_service.create_site(db, payload.model_dump())
    except (SiteValidationError, UniquenessConflict, ProvisioningFailure) as exc:
        _raise_for_site_error(db, exc)
    db.commit()
    return _site_out(site, config)


@router.get('/resolve', response_model=SiteOut)
def resolve_site(
    host: str = Query(min_length=1),
    path: str | None = Query(default=None),
    db: Session = Depends(get_db),
    config: SiteRoutingConfig = Depends(get_site_routing_config),
) -> SiteOut:
    site = site_service.resolve_site(db, host, path, config)
    if site is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='No site matches this host and path')
    return _site_out(site, config)


@router.get('/{site_id}', response_model=SiteOut)
def get_site(
    site_id: UUID,
    db: Session = Depends(get_db),
    config: SiteRoutingConfig = Depends(get_site_routing_config),
) -> SiteOut:
    return _site_out(_get_site_or_404(db, site_id), config)


@router.patch('/{site_id}', response_model=SiteOut)
def update_site(
    site_id: UUID,
    payload: SiteUpdate,
    db: Session = Depends(get_db),
    config: SiteRoutingConfig = Depends(get_site_routing_config),
) -> SiteOut:
    site = _get_site_or_404(db, site_id)
    try:
        site = site_service.update_site(db, site, payload.model_dump(exclude_unset=True))
    except (SiteValidationError, UniquenessConflict) as exc:
        _raise_for_site_error(db, exc)
    db.commit()
    return _site_out(site, config)


@router.delete('/{site_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_site(
    site_id: UUID,
    db: Session = Depends(get_db),
) -> Response:
    site = _get_site_or_404(db, site_id)
    site_service.destroy_site(db, site)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get('/{site_id}/url', response_model=SiteUrlOut)
def get_site_url(
    site_id: UUID,
    relative: bool = Query(default=False),
    db: Session = Depends(get_db),
    config: SiteRoutingConfig = Depends(get_site_routing_config),
) -> SiteUrlOut:
    site = _get_site_or_404(db, site_id)
    url = compose_url(site, config, relative=relative)
    return SiteUrlOut(site_id=site.id, relative=relative, url=url or '/')
