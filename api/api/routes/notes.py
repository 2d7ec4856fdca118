from fastapi import APIRouter, Depends, HTTPException

from api.core.config import Settings, get_settings
from api.core.dependencies import get_note_store
from api.schemas.note import (
    NoteField,
    NoteResponse,
    NotesSnapshotResponse,
    NoteTextUpdate,
    SaveResponse,
)
from api.services.note_store import NotesNotReadyError, NoteStore
from api.services.strategy_catalog import UnknownStrategyError, get_strategy

router = APIRouter()


def _require_strategy(strategy_id: str) -> str:
    try:
        return get_strategy(strategy_id).id.value
    except UnknownStrategyError:
        raise HTTPException(status_code=404, detail="Strategy not found")


def _note_response(store: NoteStore, strategy_id: str) -> NoteResponse:
    note = store.get_note(strategy_id)
    return NoteResponse(
        strategy_id=strategy_id,
        question=note.question,
        reflection=note.reflection,
        question_saved=store.is_acknowledged(strategy_id, NoteField.question),
        reflection_saved=store.is_acknowledged(strategy_id, NoteField.reflection),
    )


@router.get("/", response_model=NotesSnapshotResponse)
def get_notes(store: NoteStore = Depends(get_note_store)):
    """Get every saved question and reflection, keyed by strategy."""
    questions, reflections = store.snapshot()
    return NotesSnapshotResponse(
        hydrated=store.hydrated,
        remote_enabled=store.remote_enabled,
        questions=questions,
        reflections=reflections,
    )


@router.get("/{strategy_id}", response_model=NoteResponse)
def get_note(strategy_id: str, store: NoteStore = Depends(get_note_store)):
    """Get one strategy's notes along with their transient saved flags."""
    strategy_id = _require_strategy(strategy_id)
    if not store.hydrated:
        raise HTTPException(status_code=503, detail="Notes are still loading")
    return _note_response(store, strategy_id)


@router.put("/{strategy_id}/{field}", response_model=NoteResponse)
def update_note(
    strategy_id: str,
    field: NoteField,
    update: NoteTextUpdate,
    store: NoteStore = Depends(get_note_store),
    settings: Settings = Depends(get_settings),
):
    """
    Edit a note in memory (and the local cache) without saving it remotely.
    - question: cut to the configured maximum length
    - reflection: stored as given
    """
    strategy_id = _require_strategy(strategy_id)
    text = update.text
    if field is NoteField.question:
        text = text[: settings.question_max_chars]
    try:
        store.set_field(strategy_id, field, text)
    except NotesNotReadyError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return _note_response(store, strategy_id)


@router.post("/{strategy_id}/{field}/save", response_model=SaveResponse)
def save_note(strategy_id: str, field: NoteField, store: NoteStore = Depends(get_note_store)):
    """Save one field; remote failures degrade to a local-only save."""
    strategy_id = _require_strategy(strategy_id)
    try:
        outcome = store.save(strategy_id, field)
    except NotesNotReadyError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return SaveResponse(
        strategy_id=outcome.strategy_id,
        field=outcome.field,
        remote_synced=outcome.remote_synced,
        storage=outcome.storage,
        acknowledged=store.is_acknowledged(outcome.strategy_id, outcome.field),
    )
