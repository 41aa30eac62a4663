from dataclasses import dataclass

from cms_sites.core.config import SiteRoutingConfig
from cms_sites.multitenancy.site_urls import compose_url


@dataclass
class UrlSite:
    hostname: str
    path: str | None = None


def test_path_scoped_site_urls() -> None:
    config = SiteRoutingConfig()
    site = UrlSite('x', 'blog')
    assert compose_url(site, config, relative=True) == '/blog'
    assert compose_url(site, config) == '//x/blog'


def test_root_site_urls() -> None:
    config = SiteRoutingConfig()
    site = UrlSite('example.com')
    assert compose_url(site, config, relative=True) is None
    assert compose_url(site, config) == '//example.com'


def test_public_mount_prefix_is_included() -> None:
    config = SiteRoutingConfig.from_mapping(public_cms_path='/cms/')
    assert compose_url(UrlSite('x', 'blog'), config) == '//x/cms/blog'
    assert compose_url(UrlSite('x'), config, relative=True) == '/cms'


def test_host_with_port_is_kept() -> None:
    assert compose_url(UrlSite('localhost:3000', 'docs'), SiteRoutingConfig()) == '//localhost:3000/docs'
