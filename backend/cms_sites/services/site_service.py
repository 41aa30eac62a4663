import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cms_sites.core.config import SiteRoutingConfig
from cms_sites.core.exceptions import SiteValidationError, UniquenessConflict
from cms_sites.models.site import Category, File, Layout, Page, Site, Snippet
from cms_sites.multitenancy.site_fields import SiteFields, normalize_site_fields, validate_site_fields
from cms_sites.multitenancy.site_resolution import match_site, real_host_from_aliases, request_path
from cms_sites.services import provisioning_service


logger = logging.getLogger(__name__)

# Owned content, deleted in this order before the site row itself.
OWNED_MODELS = (Page, Layout, Snippet, File, Category)


def _creation_order():
    return (Site.created_at.asc(), Site.id.asc())


def _prepare_fields(fields: SiteFields) -> SiteFields:
    normalized = normalize_site_fields(fields)
    errors = validate_site_fields(normalized)
    if errors:
        raise SiteValidationError(errors)
    return normalized


def _check_uniqueness(db: Session, fields: SiteFields, *, exclude_id: UUID | None = None) -> None:
    conflicts: list[str] = []

    identifier_query = select(Site.id).where(Site.identifier == fields.identifier)
    if fields.path is None:
        location_query = select(Site.id).where(Site.hostname == fields.hostname, Site.path.is_(None))
    else:
        location_query = select(Site.id).where(Site.hostname == fields.hostname, Site.path == fields.path)
    if exclude_id is not None:
        identifier_query = identifier_query.where(Site.id != exclude_id)
        location_query = location_query.where(Site.id != exclude_id)

    if db.scalar(identifier_query.limit(1)) is not None:
        conflicts.append('identifier')
    if db.scalar(location_query.limit(1)) is not None:
        conflicts.append('hostname')

    if conflicts:
        raise UniquenessConflict(conflicts)


def _flush_site(db: Session, site: Site) -> None:
    identifier = site.identifier
    try:
        db.flush()
    except IntegrityError as exc:
        # Lost a race against a concurrent writer; the unique constraints caught it.
        logger.warning('Integrity conflict while saving site %s: %s', identifier, exc.orig)
        raise UniquenessConflict(['identifier', 'hostname'], 'Site identifier or hostname/path already taken') from exc


def create_site(db: Session, data: SiteFields | Mapping[str, Any]) -> Site:
    fields = data if isinstance(data, SiteFields) else SiteFields.from_mapping(data)
    fields = _prepare_fields(fields)
    _check_uniqueness(db, fields)

    site = Site(**fields.as_dict())
    db.add(site)
    _flush_site(db, site)

    provisioning_service.provision_site(db, site)
    logger.info('Created site %s for %s/%s', site.identifier, site.hostname, site.path or '')
    return site


def update_site(db: Session, site: Site, changes: Mapping[str, Any]) -> Site:
    current = SiteFields(identifier=site.identifier, hostname=site.hostname, path=site.path, label=site.label)
    merged = SiteFields.from_mapping({**current.as_dict(), **changes})
    fields = _prepare_fields(merged)
    _check_uniqueness(db, fields, exclude_id=site.id)

    for name, value in fields.as_dict().items():
        setattr(site, name, value)
    _flush_site(db, site)
    return site


def destroy_site(db: Session, site: Site) -> None:
    identifier = site.identifier
    for model in OWNED_MODELS:
        db.execute(delete(model).where(model.site_id == site.id))
    db.execute(delete(Site).where(Site.id == site.id))
    db.flush()
    logger.info('Destroyed site %s and its content', identifier)


def get_site(db: Session, site_id: UUID) -> Site | None:
    return db.get(Site, site_id)


def list_sites(db: Session, *, page: int = 1, page_size: int = 20) -> tuple[list[Site], int]:
    total = db.scalar(select(func.count(Site.id)))
    rows = db.scalars(
        select(Site).order_by(*_creation_order()).offset((page - 1) * page_size).limit(page_size)
    ).all()
    return list(rows), int(total or 0)


def resolve_site(db: Session, host: str, path: str | None, config: SiteRoutingConfig) -> Site | None:
    if db.scalar(select(func.count(Site.id))) == 1:
        return db.scalar(select(Site).limit(1))

    canonical = real_host_from_aliases(host, config)
    candidates = db.scalars(select(Site).where(Site.hostname == canonical).order_by(*_creation_order())).all()
    site = match_site(candidates, request_path(path, config))
    if site is None:
        logger.debug('No site matched host=%s path=%s', host, path)
    return site
