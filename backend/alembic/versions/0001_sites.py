"""sites and owned content tables

Revision ID: 0001_sites
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


revision: str = '0001_sites'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _site_fk() -> sa.Column:
    return sa.Column('site_id', sa.Uuid(), sa.ForeignKey('sites.id', ondelete='CASCADE'), nullable=False)


def upgrade() -> None:
    op.create_table(
        'sites',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('identifier', sa.String(length=255), nullable=False),
        sa.Column('hostname', sa.String(length=255), nullable=False),
        sa.Column('path', sa.String(length=255), nullable=True),
        sa.Column('label', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('identifier', name='uq_sites_identifier'),
        sa.UniqueConstraint('hostname', 'path', name='uq_sites_hostname_path'),
    )
    op.create_index('ix_sites_hostname', 'sites', ['hostname'])
    op.create_index(
        'uq_sites_root_hostname',
        'sites',
        ['hostname'],
        unique=True,
        postgresql_where=sa.text('path IS NULL'),
        sqlite_where=sa.text('path IS NULL'),
    )

    op.create_table(
        'layouts',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        _site_fk(),
        sa.Column('app_layout', sa.String(length=255), nullable=True),
        sa.Column('label', sa.String(length=255), nullable=False),
        sa.Column('identifier', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('css', sa.Text(), nullable=True),
        sa.Column('js', sa.Text(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.UniqueConstraint('site_id', 'identifier', name='uq_layouts_site_identifier'),
    )
    op.create_index('ix_layouts_site_id', 'layouts', ['site_id'])

    op.create_table(
        'pages',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        _site_fk(),
        sa.Column('layout_id', sa.Uuid(), sa.ForeignKey('layouts.id', ondelete='SET NULL'), nullable=True),
        sa.Column('parent_id', sa.Uuid(), sa.ForeignKey('pages.id', ondelete='CASCADE'), nullable=True),
        sa.Column('label', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=True),
        sa.Column('full_path', sa.String(length=1024), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        *_timestamps(),
        sa.UniqueConstraint('site_id', 'full_path', name='uq_pages_site_full_path'),
    )
    op.create_index('ix_pages_site_id', 'pages', ['site_id'])

    op.create_table(
        'snippets',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        _site_fk(),
        sa.Column('label', sa.String(length=255), nullable=False),
        sa.Column('identifier', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.UniqueConstraint('site_id', 'identifier', name='uq_snippets_site_identifier'),
    )
    op.create_index('ix_snippets_site_id', 'snippets', ['site_id'])

    op.create_table(
        'files',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        _site_fk(),
        sa.Column('label', sa.String(length=255), nullable=False),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('content_type', sa.String(length=255), nullable=True),
        sa.Column('file_size', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )
    op.create_index('ix_files_site_id', 'files', ['site_id'])

    op.create_table(
        'categories',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        _site_fk(),
        sa.Column('label', sa.String(length=255), nullable=False),
        sa.Column('categorized_type', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('site_id', 'categorized_type', 'label', name='uq_categories_site_type_label'),
    )
    op.create_index('ix_categories_site_id', 'categories', ['site_id'])


def downgrade() -> None:
    for table in ('categories', 'files', 'snippets', 'pages', 'layouts'):
        op.drop_index(f'ix_{table}_site_id', table_name=table)
        op.drop_table(table)
    op.drop_index('uq_sites_root_hostname', table_name='sites')
    op.drop_index('ix_sites_hostname', table_name='sites')
    op.drop_table('sites')
