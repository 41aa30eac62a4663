from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from cms_sites.core.config import settings


def engine_options(database_url: str) -> dict[str, Any]:
    if database_url.startswith('sqlite'):
        options: dict[str, Any] = {'connect_args': {'check_same_thread': False}}
        if ':memory:' in database_url or database_url.rstrip('/') in ('sqlite:', 'sqlite+pysqlite:'):
            # One shared connection so every session sees the same in-memory database.
            options['poolclass'] = StaticPool
        return options
    return {'pool_pre_ping': True}


engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
