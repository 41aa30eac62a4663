from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace
from typing import Any


IDENTIFIER_PATTERN = re.compile(r'\A\w[a-z0-9_-]*\Z', re.IGNORECASE | re.ASCII)
HOSTNAME_PATTERN = re.compile(r'\A[\w.-]+(?::\d+)?\Z', re.ASCII)


@dataclass(frozen=True)
class SiteFields:
    identifier: str | None = None
    hostname: str | None = None
    path: str | None = None
    label: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SiteFields:
        names = {item.name for item in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def as_dict(self) -> dict[str, str | None]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def parameterize(value: str) -> str:
    value = (value or '').strip().lower()
    value = re.sub(r'[^a-z0-9]+', '-', value)
    return re.sub(r'^-+|-+$', '', value)


def titleize(value: str) -> str:
    return ' '.join(token.capitalize() for token in re.split(r'[-_\s]+', value or '') if token)


def assign_identifier(site: SiteFields) -> SiteFields:
    if not is_blank(site.identifier):
        return site
    if is_blank(site.hostname):
        return site
    return replace(site, identifier=parameterize(site.hostname))


def assign_hostname(site: SiteFields) -> SiteFields:
    if is_blank(site.hostname):
        return replace(site, hostname=site.identifier)
    return site


def assign_label(site: SiteFields) -> SiteFields:
    if is_blank(site.label) and not is_blank(site.identifier):
        return replace(site, label=titleize(site.identifier))
    return site


def clean_path(site: SiteFields) -> SiteFields:
    path = site.path or ''
    path = re.sub(r'/{2,}', '/', path)
    if path.endswith('/'):
        path = path[:-1]
    return replace(site, path=path or None)


NORMALIZATION_STEPS: tuple[Callable[[SiteFields], SiteFields], ...] = (
    assign_identifier,
    assign_hostname,
    assign_label,
    clean_path,
)


def normalize_site_fields(site: SiteFields) -> SiteFields:
    for step in NORMALIZATION_STEPS:
        site = step(site)
    return site


def validate_site_fields(site: SiteFields) -> dict[str, list[str]]:
    """
    Pattern and presence checks that do not need the database.

    Returns an empty mapping when the fields are valid; uniqueness is checked
    separately by the site service.
    """
    errors: dict[str, list[str]] = {}

    if is_blank(site.identifier):
        errors.setdefault('identifier', []).append("can't be blank")
    elif not IDENTIFIER_PATTERN.match(site.identifier):
        errors.setdefault('identifier', []).append('is invalid')

    if is_blank(site.label):
        errors.setdefault('label', []).append("can't be blank")

    if is_blank(site.hostname):
        errors.setdefault('hostname', []).append("can't be blank")
    elif not HOSTNAME_PATTERN.match(site.hostname):
        errors.setdefault('hostname', []).append('is invalid')

    return errors
