from cms_sites.schemas.common import BaseSchema, PaginationMeta, TimestampedSchema
from cms_sites.schemas.site import (
    SiteContextOut,
    SiteCreate,
    SiteListResponse,
    SiteOut,
    SiteUpdate,
    SiteUrlOut,
)

__all__ = [
    'BaseSchema',
    'PaginationMeta',
    'SiteContextOut',
    'SiteCreate',
    'SiteListResponse',
    'SiteOut',
    'SiteUpdate',
    'SiteUrlOut',
    'TimestampedSchema',
]
