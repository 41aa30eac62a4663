import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cms_sites.core.exceptions import ProvisioningFailure
from cms_sites.models.site import Layout, Page, Site


logger = logging.getLogger(__name__)

DEFAULT_APP_LAYOUT = 'application'
DEFAULT_LAYOUT_LABEL = 'Checkin Layout'
DEFAULT_LAYOUT_IDENTIFIER = 'checkin-layout'
ROOT_PAGE_PATH = '/'

DEFAULT_LAYOUT_CONTENT = '\r\n'.join(
    [
        '<article class="dashboard-content dashboard-page container">',
        '  <section class="section pt-0">',
        '    <div class="row main-row">',
        '      <div class="col-md-4 hidden-xs-down">',
        '        {{ cms:partial "cms/nav" }}',
        '      </div>',
        '      <div class="col-md-8 col-xs-12 border-left h-100">',
        '        <div class="pure-container" data-effect="pure-effect-slide">',
        '          <input type="checkbox" id="pure-toggle-right" class="pure-toggle" data-toggle="right">',
        '          <label class="pure-toggle-label" for="pure-toggle-right" data-toggle-label="right">',
        '            <span class="pure-toggle-icon"></span>',
        '          </label>',
        '          <div class="pure-drawer" data-position="right">',
        '            {{ cms:partial "cms/drawer" }}',
        '          </div>',
        '          <div class="pure-pusher-container">',
        '            <div class="pure-pusher">',
        '              {{ cms:wysiwyg content }}',
        '            </div>',
        '          </div>',
        '          <label class="pure-overlay" for="pure-toggle-right" data-overlay="right"></label>',
        '        </div>',
        '      </div>',
        '    </div>',
        '  </section>',
        '</article>',
    ]
)


def provision_site(db: Session, site: Site) -> tuple[Layout, Page]:
    """
    Create the default layout and root page for a freshly persisted site.

    Runs inside the caller's transaction; any database error surfaces as
    ProvisioningFailure and the caller is expected to roll back the site too.
    """
    identifier = site.identifier
    try:
        layout = Layout(
            site_id=site.id,
            app_layout=DEFAULT_APP_LAYOUT,
            label=DEFAULT_LAYOUT_LABEL,
            identifier=DEFAULT_LAYOUT_IDENTIFIER,
            position=0,
            js='',
            css='',
            content=DEFAULT_LAYOUT_CONTENT,
        )
        db.add(layout)
        db.flush()

        page = Page(
            site_id=site.id,
            layout_id=layout.id,
            label=site.label,
            full_path=ROOT_PAGE_PATH,
            position=0,
            is_published=True,
        )
        db.add(page)
        db.flush()
    except SQLAlchemyError as exc:
        logger.error('Provisioning failed for site %s: %s', identifier, exc)
        raise ProvisioningFailure(f'Could not provision default content for site {identifier!r}') from exc

    logger.info('Provisioned default layout and root page for site %s', identifier)
    return layout, page
