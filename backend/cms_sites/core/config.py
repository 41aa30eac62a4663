from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class SiteRoutingConfig:
    """
    Process-wide routing configuration, built once at startup and passed explicitly
    to the alias/site resolvers and the URL composer.

    `hostname_aliases` keeps declaration order: the first canonical host whose
    alias list contains the inbound host wins.
    """

    public_cms_path: str = '/'
    hostname_aliases: tuple[tuple[str, tuple[str, ...]], ...] = ()

    @classmethod
    def from_mapping(
        cls,
        *,
        public_cms_path: str | None = None,
        hostname_aliases: Mapping[str, Iterable[str]] | None = None,
    ) -> 'SiteRoutingConfig':
        aliases = tuple(
            (canonical, tuple(hosts)) for canonical, hosts in (hostname_aliases or {}).items()
        )
        public_cms_path = (public_cms_path or '/').rstrip('/') or '/'
        return cls(public_cms_path=public_cms_path, hostname_aliases=aliases)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='forbid',
    )

    DATABASE_URL: str
    ADMIN_JWT_SECRET: str
    APP_ENV: str = 'development'
    CORS_ORIGINS: str = 'http://localhost:3001'
    TRUST_PROXY_HEADERS: bool = False

    JWT_ALGORITHM: str = 'HS256'
    ADMIN_SCOPE: str = 'sites:admin'

    # Path under which the whole CMS is mounted, e.g. '/cms' behind a reverse proxy.
    PUBLIC_CMS_PATH: str = '/'
    # JSON object: {"example.com": ["www.example.com", "example.net"]}
    HOSTNAME_ALIASES: dict[str, list[str]] = {}

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        if not value.startswith(('postgresql', 'sqlite')):
            raise ValueError('DATABASE_URL must point to PostgreSQL (or SQLite for local runs)')
        return value

    @field_validator('ADMIN_JWT_SECRET')
    @classmethod
    def validate_jwt_secret_strength(cls, value: str) -> str:
        if len(value) < 32:
            raise ValueError('ADMIN_JWT_SECRET must be at least 32 characters')
        return value

    @field_validator('PUBLIC_CMS_PATH')
    @classmethod
    def normalize_public_cms_path(cls, value: str) -> str:
        value = value.strip()
        return value or '/'

    @field_validator('HOSTNAME_ALIASES')
    @classmethod
    def normalize_hostname_aliases(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        return {canonical.strip(): [host.strip() for host in hosts if host.strip()] for canonical, hosts in value.items()}

    @property
    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.CORS_ORIGINS.split(',') if item.strip()]

    @property
    def site_routing(self) -> SiteRoutingConfig:
        return SiteRoutingConfig.from_mapping(
            public_cms_path=self.PUBLIC_CMS_PATH,
            hostname_aliases=self.HOSTNAME_ALIASES,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
