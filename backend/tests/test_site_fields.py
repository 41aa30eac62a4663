import pytest

from cms_sites.multitenancy.site_fields import (
    SiteFields,
    assign_hostname,
    assign_identifier,
    assign_label,
    clean_path,
    normalize_site_fields,
    parameterize,
    titleize,
    validate_site_fields,
)


def test_parameterize_collapses_non_alphanumeric_runs() -> None:
    assert parameterize('Example.COM') == 'example-com'
    assert parameterize('..my__site--test..') == 'my-site-test'
    assert parameterize('localhost:3000') == 'localhost-3000'
    assert parameterize('...') == ''


def test_titleize_capitalizes_each_token() -> None:
    assert titleize('example-com') == 'Example Com'
    assert titleize('my_blog-site') == 'My Blog Site'


def test_identifier_defaults_from_hostname() -> None:
    site = assign_identifier(SiteFields(hostname='new.test'))
    assert site.identifier == 'new-test'


def test_identifier_is_kept_when_present() -> None:
    site = assign_identifier(SiteFields(identifier='custom', hostname='new.test'))
    assert site.identifier == 'custom'


def test_identifier_stays_blank_without_hostname() -> None:
    site = assign_identifier(SiteFields(identifier='  '))
    assert site.identifier == '  '


def test_hostname_defaults_from_identifier() -> None:
    site = assign_hostname(SiteFields(identifier='intranet'))
    assert site.hostname == 'intranet'


def test_label_defaults_from_identifier() -> None:
    site = assign_label(SiteFields(identifier='new-test'))
    assert site.label == 'New Test'
    assert assign_label(SiteFields(identifier='x', label='Keep')).label == 'Keep'


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [
        (None, None),
        ('', None),
        ('/', None),
        ('//', None),
        ('blog', 'blog'),
        ('blog/', 'blog'),
        ('blog//posts///', 'blog/posts'),
        ('/blog', '/blog'),
    ],
)
def test_clean_path(raw: str | None, expected: str | None) -> None:
    assert clean_path(SiteFields(path=raw)).path == expected


def test_normalization_runs_in_order() -> None:
    site = normalize_site_fields(SiteFields(hostname='docs.example.com', path='guides//'))
    assert site == SiteFields(
        identifier='docs-example-com',
        hostname='docs.example.com',
        path='guides',
        label='Docs Example Com',
    )


def test_normalization_from_identifier_only() -> None:
    site = normalize_site_fields(SiteFields(identifier='intranet'))
    assert site.hostname == 'intranet'
    assert site.label == 'Intranet'
    assert site.path is None


def test_valid_fields_have_no_errors() -> None:
    site = normalize_site_fields(SiteFields(hostname='example.com:8080'))
    assert validate_site_fields(site) == {}


def test_blank_fields_are_reported() -> None:
    errors = validate_site_fields(normalize_site_fields(SiteFields()))
    assert set(errors) == {'identifier', 'hostname', 'label'}


@pytest.mark.parametrize('identifier', ['-leading', 'has space', 'dots.not.allowed', 'ünicode'])
def test_malformed_identifier_is_invalid(identifier: str) -> None:
    errors = validate_site_fields(SiteFields(identifier=identifier, hostname='example.com', label='X'))
    assert errors == {'identifier': ['is invalid']}


def test_identifier_pattern_is_case_insensitive() -> None:
    assert validate_site_fields(SiteFields(identifier='MySite_1', hostname='example.com', label='X')) == {}


@pytest.mark.parametrize('hostname', ['exa mple.com', 'example.com:', 'example.com:80a', 'http://example.com'])
def test_malformed_hostname_is_invalid(hostname: str) -> None:
    errors = validate_site_fields(SiteFields(identifier='site', hostname=hostname, label='X'))
    assert errors == {'hostname': ['is invalid']}


def test_from_mapping_ignores_unknown_keys() -> None:
    site = SiteFields.from_mapping({'hostname': 'example.com', 'unexpected': 1})
    assert site.hostname == 'example.com'
