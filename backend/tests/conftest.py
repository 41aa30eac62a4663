import os
from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

TEST_DATABASE_URL = os.getenv('TEST_DATABASE_URL', 'sqlite+pysqlite:///:memory:')

os.environ.setdefault('DATABASE_URL', TEST_DATABASE_URL)
os.environ.setdefault('ADMIN_JWT_SECRET', 'test-admin-secret-32-chars-min-0001')
os.environ.setdefault('APP_ENV', 'test')
os.environ.setdefault('CORS_ORIGINS', 'http://localhost:3001')

from cms_sites.core.config import SiteRoutingConfig
from cms_sites.core.security import create_admin_token
from cms_sites.db.base import Base
from cms_sites.db.session import engine_options, get_db
from cms_sites.main import app
from cms_sites.models.site import Site
from cms_sites.multitenancy.deps import get_site_routing_config
from cms_sites.services import site_service


engine = create_engine(TEST_DATABASE_URL, **engine_options(TEST_DATABASE_URL))
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture(autouse=True)
def setup_database() -> Generator[None, None, None]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    yield

    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture()
def routing_config() -> SiteRoutingConfig:
    return SiteRoutingConfig()


@pytest.fixture()
def client(db_session: Session, routing_config: SiteRoutingConfig) -> Generator[TestClient, None, None]:
    def _override_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _override_db
    app.dependency_overrides[get_site_routing_config] = lambda: routing_config

    with TestClient(app) as api_client:
        yield api_client

    app.dependency_overrides.clear()


@pytest.fixture()
def make_site(db_session: Session) -> Callable[..., Site]:
    def _make_site(**fields: Any) -> Site:
        site = site_service.create_site(db_session, fields)
        db_session.commit()
        return site

    return _make_site


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {'Authorization': f'Bearer {create_admin_token("test-admin")}'}
