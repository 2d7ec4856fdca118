import pytest
from sqlalchemy import create_engine

import api.models  # noqa: F401  (registers tables on Base.metadata)
from api.core.database import Base, make_session_factory
from api.services.remote_store import EnabledRemoteStore
from tests.fakes import FakeStorage


@pytest.fixture
def fake_storage():
    return FakeStorage()


@pytest.fixture
def remote_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'remote.db'}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def remote_store(remote_engine):
    return EnabledRemoteStore(make_session_factory(remote_engine))
