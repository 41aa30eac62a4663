from uuid import UUID

from pydantic import BaseModel, Field

from cms_sites.schemas.common import PaginationMeta, TimestampedSchema


class SiteCreate(BaseModel):
    identifier: str | None = Field(default=None, max_length=255)
    hostname: str | None = Field(default=None, max_length=255)
    path: str | None = Field(default=None, max_length=255)
    label: str | None = Field(default=None, max_length=255)


class SiteUpdate(BaseModel):
    identifier: str | None = Field(default=None, max_length=255)
    hostname: str | None = Field(default=None, max_length=255)
    path: str | None = Field(default=None, max_length=255)
    label: str | None = Field(default=None, max_length=255)


class SiteOut(TimestampedSchema):
    identifier: str
    hostname: str
    path: str | None
    label: str
    url: str | None = None


class SiteListResponse(BaseModel):
    items: list[SiteOut]
    meta: PaginationMeta


class SiteUrlOut(BaseModel):
    site_id: UUID
    relative: bool
    url: str


class SiteContextOut(BaseModel):
    site: SiteOut
    host: str
    path: str
