import pytest
from pydantic import ValidationError

from cms_sites.core.config import Settings, SiteRoutingConfig


def test_hostname_aliases_keep_declaration_order(monkeypatch) -> None:
    monkeypatch.setenv('HOSTNAME_ALIASES', '{"b.test": [" alias.test ", ""], "a.test": ["alias.test"]}')
    monkeypatch.setenv('PUBLIC_CMS_PATH', '/cms/')

    routing = Settings(_env_file=None).site_routing

    assert routing.hostname_aliases == (('b.test', ('alias.test',)), ('a.test', ('alias.test',)))
    assert routing.public_cms_path == '/cms'


def test_routing_defaults() -> None:
    routing = SiteRoutingConfig.from_mapping()
    assert routing.public_cms_path == '/'
    assert routing.hostname_aliases == ()


def test_database_url_must_be_supported(monkeypatch) -> None:
    monkeypatch.setenv('DATABASE_URL', 'mysql://localhost/cms')
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_admin_secret_must_be_long_enough(monkeypatch) -> None:
    monkeypatch.setenv('ADMIN_JWT_SECRET', 'short')
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
