from dataclasses import dataclass

from cms_sites.core.config import SiteRoutingConfig
from cms_sites.multitenancy.site_resolution import find_site, match_site, real_host_from_aliases, request_path


@dataclass
class RouteSite:
    name: str
    hostname: str
    path: str | None = None


DEFAULT = SiteRoutingConfig()


def test_alias_resolves_to_canonical_host() -> None:
    config = SiteRoutingConfig.from_mapping(hostname_aliases={'example.com': ['alias1.test', 'alias2.test']})
    assert real_host_from_aliases('alias2.test', config) == 'example.com'


def test_unknown_host_passes_through() -> None:
    config = SiteRoutingConfig.from_mapping(hostname_aliases={'example.com': ['alias1.test']})
    assert real_host_from_aliases('other.test', config) == 'other.test'
    assert real_host_from_aliases('other.test', DEFAULT) == 'other.test'


def test_first_declared_alias_entry_wins() -> None:
    config = SiteRoutingConfig.from_mapping(
        hostname_aliases={'first.test': ['shared.test'], 'second.test': ['shared.test']}
    )
    assert real_host_from_aliases('shared.test', config) == 'first.test'


def test_single_site_is_returned_for_any_request() -> None:
    only = RouteSite('only', 'example.com')
    assert find_site([only], 'unknown-host', '/whatever', DEFAULT) is only
    assert find_site([only], 'unknown-host', None, DEFAULT) is only


def test_path_scoped_site_takes_precedence_over_root() -> None:
    root = RouteSite('root', 'x')
    blog = RouteSite('blog', 'x', 'blog')
    sites = [root, blog]
    assert find_site(sites, 'x', '/blog/post-1', DEFAULT) is blog
    assert find_site(sites, 'x', '/blog', DEFAULT) is blog
    assert find_site(sites, 'x', '/about', DEFAULT) is root
    assert find_site(sites, 'x', '/blogger', DEFAULT) is root
    assert find_site(sites, 'x', None, DEFAULT) is root


def test_alias_host_resolves_like_canonical_host() -> None:
    config = SiteRoutingConfig.from_mapping(hostname_aliases={'example.com': ['alias1.test']})
    sites = [RouteSite('main', 'example.com'), RouteSite('other', 'other.com')]
    assert find_site(sites, 'alias1.test', '/', config) is find_site(sites, 'example.com', '/', config)
    assert find_site(sites, 'alias1.test', '/', config).name == 'main'


def test_unknown_host_returns_none() -> None:
    sites = [RouteSite('a', 'a.test'), RouteSite('b', 'b.test')]
    assert find_site(sites, 'unknown-host', '/', DEFAULT) is None


def test_host_without_root_site_and_unmatched_path_returns_none() -> None:
    sites = [RouteSite('blog', 'x', 'blog'), RouteSite('docs', 'x', 'docs')]
    assert find_site(sites, 'x', '/about', DEFAULT) is None


def test_public_mount_prefix_is_stripped() -> None:
    config = SiteRoutingConfig.from_mapping(public_cms_path='/cms')
    root = RouteSite('root', 'x')
    blog = RouteSite('blog', 'x', 'blog')
    assert find_site([root, blog], 'x', '/cms/blog/post-1', config) is blog
    assert find_site([root, blog], 'x', '/cms/about', config) is root


def test_query_string_is_ignored() -> None:
    root = RouteSite('root', 'x')
    blog = RouteSite('blog', 'x', 'blog')
    assert find_site([root, blog], 'x', '/blog?page=2', DEFAULT) is blog


def test_request_path() -> None:
    config = SiteRoutingConfig.from_mapping(public_cms_path='/cms')
    assert request_path('/cms/blog?x=1', config) == '/blog'
    assert request_path('/other/cms', config) == '/other/cms'
    assert request_path(None, config) == ''
    assert request_path('/cms/blog', DEFAULT) == '/cms/blog'


def test_first_matching_path_scoped_site_wins_not_longest() -> None:
    # Sibling paths are not ranked by prefix length; retrieval order decides.
    outer = RouteSite('outer', 'x', 'docs')
    inner = RouteSite('inner', 'x', 'docs/api')
    assert match_site([outer, inner], '/docs/api/v1') is outer
    assert match_site([inner, outer], '/docs/api/v1') is inner
