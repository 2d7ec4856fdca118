"""Process-wide service instances handed to routes through FastAPI Depends."""

from functools import lru_cache

from api.core.config import get_settings
from api.services.local_cache import LocalCache
from api.services.note_store import NoteStore
from api.services.remote_store import build_remote_store
from api.services.save_acknowledgement import SaveAcknowledgements
from workflows.assistant import AssistantGateway, ChatSession


@lru_cache
def get_note_store() -> NoteStore:
    settings = get_settings()
    return NoteStore(
        local_cache=LocalCache(settings.local_cache_path),
        remote_store=build_remote_store(settings),
        acknowledgements=SaveAcknowledgements(hold_seconds=settings.save_ack_seconds),
    )


@lru_cache
def get_chat_session() -> ChatSession:
    return ChatSession(AssistantGateway(settings=get_settings()))
