"""SQLAlchemy plumbing for the optional remote note store."""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from api.core.config import Settings

Base = declarative_base()


def build_remote_url(settings: Settings) -> Optional[URL]:
    """The remote store URL with the access key applied as its password.

    Keeping the key out of the URL lets the URL itself be shared without
    secrets (e.g. a Supabase pooler URL). Returns None when not configured.
    """
    if not settings.remote_store_configured:
        return None
    return make_url(settings.remote_store_url).set(password=settings.remote_store_key)


def build_remote_engine(settings: Settings) -> Optional[Engine]:
    """Create the engine for the remote store, or None when it is not configured."""
    url = build_remote_url(settings)
    if url is None:
        return None
    return create_engine(url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
