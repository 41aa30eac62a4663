import uuid

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Text, UniqueConstraint, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cms_sites.db.base_class import Base
from cms_sites.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Site(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'sites'
    __table_args__ = (
        UniqueConstraint('identifier', name='uq_sites_identifier'),
        UniqueConstraint('hostname', 'path', name='uq_sites_hostname_path'),
        # NULL paths never collide in a plain unique constraint; one root site per host.
        Index(
            'uq_sites_root_hostname',
            'hostname',
            unique=True,
            postgresql_where=text('path IS NULL'),
            sqlite_where=text('path IS NULL'),
        ),
    )

    identifier: Mapped[str] = mapped_column(String(255), nullable=False)
    hostname: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    path: Mapped[str | None] = mapped_column(String(255), nullable=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)

    # Read-only: owned rows are created by the provisioner and removed by
    # site_service.destroy_site, never through ORM cascades.
    layouts: Mapped[list['Layout']] = relationship(viewonly=True, order_by='Layout.position')
    pages: Mapped[list['Page']] = relationship(viewonly=True, order_by='Page.position')
    snippets: Mapped[list['Snippet']] = relationship(viewonly=True, order_by='Snippet.position')
    files: Mapped[list['File']] = relationship(viewonly=True, order_by='File.position')
    categories: Mapped[list['Category']] = relationship(viewonly=True, order_by='Category.label')

    def __repr__(self) -> str:
        return f'<Site {self.identifier} ({self.hostname}/{self.path or ""})>'


class Layout(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'layouts'
    __table_args__ = (
        UniqueConstraint('site_id', 'identifier', name='uq_layouts_site_identifier'),
    )

    site_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('sites.id', ondelete='CASCADE'), nullable=False, index=True
    )
    app_layout: Mapped[str | None] = mapped_column(String(255), nullable=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    identifier: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    css: Mapped[str | None] = mapped_column(Text, nullable=True)
    js: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Page(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'pages'
    __table_args__ = (
        UniqueConstraint('site_id', 'full_path', name='uq_pages_site_full_path'),
    )

    site_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('sites.id', ondelete='CASCADE'), nullable=False, index=True
    )
    layout_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('layouts.id', ondelete='SET NULL'), nullable=True
    )
    parent_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('pages.id', ondelete='CASCADE'), nullable=True
    )
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str | None] = mapped_column(String(255), nullable=True)
    full_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    layout: Mapped['Layout | None'] = relationship(viewonly=True)


class Snippet(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'snippets'
    __table_args__ = (
        UniqueConstraint('site_id', 'identifier', name='uq_snippets_site_identifier'),
    )

    site_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('sites.id', ondelete='CASCADE'), nullable=False, index=True
    )
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    identifier: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class File(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'files'

    site_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('sites.id', ondelete='CASCADE'), nullable=False, index=True
    )
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    content_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    file_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Category(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'categories'
    __table_args__ = (
        UniqueConstraint('site_id', 'categorized_type', 'label', name='uq_categories_site_type_label'),
    )

    site_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('sites.id', ondelete='CASCADE'), nullable=False, index=True
    )
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    categorized_type: Mapped[str] = mapped_column(String(100), nullable=False)
