from unittest.mock import patch

import pytest
from sqlalchemy import create_engine

from api.core.config import Settings
from api.core.database import build_remote_url, make_session_factory
from api.schemas.note import NoteField
from api.services.remote_store import (
    DisabledRemoteStore,
    EnabledRemoteStore,
    RemoteStoreError,
    build_remote_store,
)


def test_fetch_rows_empty(remote_store):
    assert remote_store.fetch_rows() == []


def test_upsert_creates_one_row_per_strategy(remote_store):
    remote_store.upsert_field("Warm-Up Poll", NoteField.question, "first")
    remote_store.upsert_field("Warm-Up Poll", NoteField.question, "second")
    rows = remote_store.fetch_rows()
    assert len(rows) == 1
    assert rows[0].strategy_id == "Warm-Up Poll"
    assert rows[0].question == "second"
    assert rows[0].updated_at is not None


def test_upsert_merges_columns(remote_store):
    remote_store.upsert_field("Think-Pair-Share", NoteField.reflection, "pairs drifted")
    remote_store.upsert_field("Think-Pair-Share", NoteField.question, "Which is greater?")
    [row] = remote_store.fetch_rows()
    assert row.question == "Which is greater?"
    assert row.reflection == "pairs drifted"


def test_database_errors_are_wrapped(tmp_path):
    # No tables created
    engine = create_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    store = EnabledRemoteStore(make_session_factory(engine))
    with pytest.raises(RemoteStoreError):
        store.fetch_rows()
    with pytest.raises(RemoteStoreError):
        store.upsert_field("Warm-Up Poll", NoteField.question, "Why?")


@pytest.mark.parametrize(
    "url,key",
    [("", ""), ("postgresql://postgres@db.example.supabase.co/postgres", ""), ("", "secret")],
)
def test_build_remote_store_disabled_without_both_values(url, key):
    settings = Settings(remote_store_url=url, remote_store_key=key, _env_file=None)
    store = build_remote_store(settings)
    assert isinstance(store, DisabledRemoteStore)
    assert store.enabled is False


def test_build_remote_store_enabled_applies_key_as_password():
    settings = Settings(
        remote_store_url="postgresql://postgres@db.example.supabase.co:5432/postgres",
        remote_store_key="secret",
        _env_file=None,
    )
    with patch("api.core.database.create_engine") as fake_create_engine:
        fake_create_engine.return_value.dialect.name = "postgresql"
        store = build_remote_store(settings)

    assert isinstance(store, EnabledRemoteStore)
    assert store.enabled is True
    url = fake_create_engine.call_args.args[0]
    assert url.password == "secret"
    assert url.host == "db.example.supabase.co"


@pytest.mark.parametrize(
    "url",
    [
        "https://abcd.supabase.co",  # project URL instead of a database URL
        "not a database url",
    ],
)
def test_build_remote_store_disabled_for_unusable_url(url, caplog):
    settings = Settings(remote_store_url=url, remote_store_key="anon-key", _env_file=None)
    store = build_remote_store(settings)
    assert isinstance(store, DisabledRemoteStore)
    assert "Remote store URL is unusable" in caplog.text


def test_remote_url_carries_key_as_password():
    settings = Settings(
        remote_store_url="postgresql://postgres@db.example.supabase.co:5432/postgres",
        remote_store_key="secret",
        _env_file=None,
    )
    url = build_remote_url(settings)
    assert url.password == "secret"
    assert url.database == "postgres"
    assert build_remote_url(Settings(remote_store_url="", remote_store_key="", _env_file=None)) is None
