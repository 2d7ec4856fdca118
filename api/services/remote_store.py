"""
Optional remote note store backed by a SQL database (Supabase Postgres).

The store is either disabled (no configuration) or enabled around a session
factory. `build_remote_store` is the only place that decides which, so callers
check `store.enabled` instead of testing for None.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Union

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from api.core.config import Settings
from api.core.database import build_remote_engine, make_session_factory
from api.models.strategy_note import StrategyNote
from api.schemas.note import NoteField

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class RemoteStoreError(Exception):
    """Raised when the remote database cannot be read or written."""


@dataclass
class RemoteNoteRow:
    strategy_id: str
    question: Optional[str] = None
    reflection: Optional[str] = None
    updated_at: Optional[datetime] = None


class DisabledRemoteStore:
    enabled = False

    def __repr__(self) -> str:
        return "DisabledRemoteStore()"


class EnabledRemoteStore:
    enabled = True

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def fetch_rows(self) -> List[RemoteNoteRow]:
        try:
            with self._session_factory() as db:
                rows = db.query(StrategyNote).all()
                return [
                    RemoteNoteRow(
                        strategy_id=row.strategy_id,
                        question=row.question,
                        reflection=row.reflection,
                        updated_at=row.updated_at,
                    )
                    for row in rows
                ]
        except SQLAlchemyError as e:
            raise RemoteStoreError(f"Fetching notes failed: {e}") from e

    def upsert_field(self, strategy_id: str, field: NoteField, value: str) -> None:
        """Write one field of one row, leaving the row's other field untouched.

        The conflict clause only sets the saved column and `updated_at`, so a
        question save never clobbers a previously saved reflection.
        """
        column = NoteField(field).value
        try:
            with self._session_factory() as db:
                insert = _DIALECT_INSERTS.get(db.get_bind().dialect.name)
                if insert is None:
                    raise RemoteStoreError(
                        f"Unsupported remote dialect: {db.get_bind().dialect.name}"
                    )
                stmt = insert(StrategyNote).values(
                    strategy_id=strategy_id,
                    updated_at=datetime.now(timezone.utc),
                    **{column: value},
                )
                stmt = stmt.on_conflict_do_update(
                    index_elements=[StrategyNote.strategy_id],
                    set_={
                        column: stmt.excluded[column],
                        "updated_at": stmt.excluded.updated_at,
                    },
                )
                db.execute(stmt)
                db.commit()
        except SQLAlchemyError as e:
            raise RemoteStoreError(f"Saving {column} for {strategy_id!r} failed: {e}") from e

    def __repr__(self) -> str:
        return "EnabledRemoteStore()"


RemoteStore = Union[DisabledRemoteStore, EnabledRemoteStore]


def build_remote_store(settings: Settings) -> RemoteStore:
    try:
        engine = build_remote_engine(settings)
    except SQLAlchemyError:
        # Malformed URL or unknown driver; startup carries on local-only
        logger.error("Remote store URL is unusable; notes are kept in the local cache only", exc_info=True)
        return DisabledRemoteStore()
    if engine is None:
        logger.info("Remote store not configured; notes are kept in the local cache only")
        return DisabledRemoteStore()
    logger.info("Remote store enabled (%s)", engine.dialect.name)
    return EnabledRemoteStore(make_session_factory(engine))
