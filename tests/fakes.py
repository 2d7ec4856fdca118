"""Shared in-memory collaborators for the test suite."""

from api.services.remote_store import RemoteStoreError


class FakeStorage:
    """In-memory stand-in for LocalCache."""

    def __init__(self, initial=None):
        self._store = dict(initial or {})
        self.writes = 0

    def get(self, key):
        return self._store.get(key)

    def set(self, key, value):
        self.writes += 1
        self._store[key] = value


class FailingRemoteStore:
    enabled = True

    def __init__(self):
        self.upserts = 0

    def fetch_rows(self):
        raise RemoteStoreError("network unreachable")

    def upsert_field(self, strategy_id, field, value):
        self.upserts += 1
        raise RemoteStoreError("network unreachable")


class FakeResponse:
    def __init__(self, content, response_metadata=None):
        self.content = content
        self.response_metadata = response_metadata or {}


class FakeLLM:
    """Records every call and answers with a fixed reply (or raises it)."""

    def __init__(self, reply="", error=None, response_metadata=None):
        self.reply = reply
        self.error = error
        self.response_metadata = response_metadata
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.reply, self.response_metadata)
