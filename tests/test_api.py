import json
import threading
from urllib.parse import quote

import pytest
from fastapi.testclient import TestClient

from api.core.dependencies import get_chat_session, get_note_store
from api.main import app
from api.services.note_store import LOCAL_CACHE_KEY, NoteStore
from api.services.remote_store import DisabledRemoteStore
from api.services.save_acknowledgement import SaveAcknowledgements
from api.services.strategy_catalog import get_strategy
from workflows.assistant import AssistantGateway, ChatSession
from workflows.prompts.assistant_prompts import ASSISTANT_ERROR_FALLBACK
from tests.fakes import FakeLLM


WARM_UP = quote("Warm-Up Poll")


@pytest.fixture
def note_store(fake_storage):
    return NoteStore(
        local_cache=fake_storage,
        remote_store=DisabledRemoteStore(),
        acknowledgements=SaveAcknowledgements(hold_seconds=3.0),
    )


@pytest.fixture
def llm():
    return FakeLLM(reply="Keep it to **three** questions.")


@pytest.fixture
def chat_session(llm):
    return ChatSession(AssistantGateway(llm=llm, model_name="gpt-4o-mini"))


@pytest.fixture
def overrides(note_store, chat_session):
    app.dependency_overrides[get_note_store] = lambda: note_store
    app.dependency_overrides[get_chat_session] = lambda: chat_session
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(overrides):
    # Entering the client runs the lifespan, which hydrates the notes
    with TestClient(app) as c:
        yield c


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


# ============ Strategies ============

def test_list_strategies(client):
    response = client.get("/api/strategies/")
    assert response.status_code == 200
    assert [s["id"] for s in response.json()] == [
        "Warm-Up Poll",
        "Curiosity Trigger",
        "Think-Pair-Share",
        "Self-Reflection",
    ]


def test_strategy_detail(client):
    response = client.get(f"/api/strategies/{WARM_UP}")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "Warm-Up Poll"
    assert body["tools"] == "Mentimeter"
    assert body["flow"]


def test_unknown_strategy_is_404(client):
    assert client.get("/api/strategies/Jigsaw").status_code == 404
    assert client.get("/api/notes/Jigsaw").status_code == 404


# ============ Notes ============

def test_hydrated_snapshot_on_startup(client):
    response = client.get("/api/notes/")
    assert response.json() == {
        "hydrated": True,
        "remote_enabled": False,
        "questions": {},
        "reflections": {},
    }


def test_update_question_is_capped(client, fake_storage):
    response = client.put(f"/api/notes/{WARM_UP}/question", json={"text": "q" * 300})
    assert response.status_code == 200
    assert len(response.json()["question"]) == 250

    blob = json.loads(fake_storage.get(LOCAL_CACHE_KEY))
    assert blob["questions"]["Warm-Up Poll"] == "q" * 250


def test_update_reflection_is_not_capped(client):
    response = client.put(f"/api/notes/{WARM_UP}/reflection", json={"text": "r" * 300})
    assert len(response.json()["reflection"]) == 300


def test_unknown_field_is_rejected(client):
    response = client.put(f"/api/notes/{WARM_UP}/summary", json={"text": "x"})
    assert response.status_code == 422


def test_save_sets_acknowledgement(client):
    client.put(f"/api/notes/{WARM_UP}/question", json={"text": "Why does ice float?"})

    response = client.post(f"/api/notes/{WARM_UP}/question/save")
    assert response.status_code == 200
    assert response.json() == {
        "strategy_id": "Warm-Up Poll",
        "field": "question",
        "remote_synced": False,
        "storage": "local",
        "acknowledged": True,
    }

    note = client.get(f"/api/notes/{WARM_UP}").json()
    assert note["question"] == "Why does ice float?"
    assert note["question_saved"] is True
    assert note["reflection_saved"] is False


def test_notes_unavailable_before_hydration(overrides):
    # Without entering the context manager the lifespan never runs
    client = TestClient(app)
    assert client.get(f"/api/notes/{WARM_UP}").status_code == 503
    assert client.put(f"/api/notes/{WARM_UP}/question", json={"text": "x"}).status_code == 503
    assert client.post(f"/api/notes/{WARM_UP}/question/save").status_code == 503


# ============ Assistant ============

def test_send_message(client, llm):
    response = client.post(
        "/api/assistant/messages",
        json={"strategy_id": "Warm-Up Poll", "message": "How long should this be?"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["reply"] == {"role": "assistant", "content": "Keep it to **three** questions."}
    assert [m["role"] for m in body["messages"]] == ["user", "assistant"]
    assert len(llm.calls) == 1

    assert len(client.get("/api/assistant/messages").json()) == 2


def test_blank_message_is_400(client, llm):
    response = client.post("/api/assistant/messages", json={"strategy_id": "Warm-Up Poll", "message": "  "})
    assert response.status_code == 400
    assert llm.calls == []


def test_message_for_unknown_strategy_is_404(client):
    response = client.post("/api/assistant/messages", json={"strategy_id": "Jigsaw", "message": "hi"})
    assert response.status_code == 404


def test_llm_failure_is_a_normal_reply(client, llm):
    llm.error = RuntimeError("timeout")
    response = client.post("/api/assistant/messages", json={"strategy_id": "Warm-Up Poll", "message": "hi"})
    assert response.status_code == 200
    assert response.json()["reply"]["content"] == ASSISTANT_ERROR_FALLBACK


def test_busy_assistant_is_409(client, chat_session, llm):
    entered = threading.Event()
    release = threading.Event()
    original_invoke = llm.invoke

    def blocking_invoke(messages):
        entered.set()
        release.wait(timeout=5)
        return original_invoke(messages)

    llm.invoke = blocking_invoke

    worker = threading.Thread(target=chat_session.submit, args=("first", get_strategy("Warm-Up Poll")))
    worker.start()
    try:
        assert entered.wait(timeout=5)
        response = client.post(
            "/api/assistant/messages", json={"strategy_id": "Warm-Up Poll", "message": "second"}
        )
        assert response.status_code == 409
    finally:
        release.set()
        worker.join(timeout=5)


def test_clear_messages(client):
    client.post("/api/assistant/messages", json={"strategy_id": "Warm-Up Poll", "message": "hi"})
    assert client.delete("/api/assistant/messages").status_code == 204
    assert client.get("/api/assistant/messages").json() == []


class ImmediateTimer:
    """Fires as soon as it is started, so the saved flag is already cleared."""

    def __init__(self, interval, function, args=None):
        self.function = function
        self.args = args or ()
        self.daemon = False

    def start(self):
        self.function(*self.args)

    def cancel(self):
        pass


def test_save_reports_current_acknowledgement(fake_storage, chat_session):
    store = NoteStore(
        local_cache=fake_storage,
        remote_store=DisabledRemoteStore(),
        acknowledgements=SaveAcknowledgements(timer_factory=ImmediateTimer),
    )
    app.dependency_overrides[get_note_store] = lambda: store
    app.dependency_overrides[get_chat_session] = lambda: chat_session
    try:
        with TestClient(app) as client:
            response = client.post(f"/api/notes/{WARM_UP}/reflection/save")
            assert response.status_code == 200
            assert response.json()["acknowledged"] is False
            assert client.get(f"/api/notes/{WARM_UP}").json()["reflection_saved"] is False
    finally:
        app.dependency_overrides.clear()
