#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / 'backend'))

from cms_sites.core.exceptions import SiteError  # noqa: E402
from cms_sites.db.session import SessionLocal  # noqa: E402
from cms_sites.services import site_service  # noqa: E402


def parse_site(value: str) -> dict[str, str | None]:
    """Parse `hostname[/path][=Label]`, e.g. `example.com/blog=Company Blog`."""
    location, _, label = value.partition('=')
    hostname, _, path = location.partition('/')
    return {'hostname': hostname or None, 'path': path or None, 'label': label or None}


def main() -> int:
    parser = argparse.ArgumentParser(description='Create sites (with default layout and root page).')
    parser.add_argument('sites', nargs='+', help='hostname[/path][=Label]')
    parser.add_argument('--dry-run', action='store_true', help='Validate and roll back instead of committing.')
    args = parser.parse_args()

    db = SessionLocal()
    try:
        for value in args.sites:
            site = site_service.create_site(db, parse_site(value))
            print(f'Created {site.identifier} -> {site.hostname}/{site.path or ""}')
        if args.dry_run:
            db.rollback()
            print('Dry run: rolled back.')
        else:
            db.commit()
    except SiteError as exc:
        db.rollback()
        raise SystemExit(f'Failed to create sites: {exc}') from exc
    finally:
        db.close()

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
