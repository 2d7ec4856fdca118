"""
Instructor notes (core question + reflection) per strategy.

Two backends are reconciled into one in-memory view:
- the local cache, always available, holding both full maps in one JSON blob
- the optional remote store, one row per strategy

Hydration seeds from the local cache and then folds remote rows on top, so a
non-empty remote value wins. Every in-memory change rewrites the local blob;
the remote store is only written on an explicit save, one field at a time.
Remote failures are logged and the store carries on local-only.
"""
from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Optional, Tuple

from api.schemas.note import NoteField
from api.services.local_cache import LocalCache
from api.services.remote_store import RemoteNoteRow, RemoteStore, RemoteStoreError
from api.services.save_acknowledgement import SaveAcknowledgements

logger = logging.getLogger(__name__)

LOCAL_CACHE_KEY = "polaris_local_cache"

NoteMap = Dict[str, str]


class NotesNotReadyError(RuntimeError):
    """Raised when notes are read or written before hydration has finished."""


@dataclass(frozen=True)
class PersistedNote:
    strategy_id: str
    question: str = ""
    reflection: str = ""


@dataclass(frozen=True)
class SaveOutcome:
    strategy_id: str
    field: NoteField
    remote_synced: bool
    storage: Literal["cloud", "local"]


def merge_local_snapshot(blob: Optional[str]) -> Tuple[NoteMap, NoteMap]:
    """First pass: parse the local blob into (questions, reflections)."""
    if not blob:
        return {}, {}
    try:
        parsed = json.loads(blob)
    except json.JSONDecodeError:
        logger.error("Local cache corrupted; starting with empty notes", exc_info=True)
        return {}, {}
    if not isinstance(parsed, dict):
        logger.error("Local cache holds %s instead of an object; ignoring it", type(parsed).__name__)
        return {}, {}
    return _string_map(parsed.get("questions")), _string_map(parsed.get("reflections"))


def fold_remote_rows(
    questions: NoteMap,
    reflections: NoteMap,
    rows: Iterable[RemoteNoteRow],
) -> Tuple[NoteMap, NoteMap]:
    """Second pass: non-empty remote values overwrite the seeded maps."""
    questions = dict(questions)
    reflections = dict(reflections)
    for row in rows:
        if row.question:
            questions[row.strategy_id] = row.question
        if row.reflection:
            reflections[row.strategy_id] = row.reflection
    return questions, reflections


def _string_map(value) -> NoteMap:
    if not isinstance(value, dict):
        return {}
    return {str(k): v for k, v in value.items() if isinstance(v, str)}


class NoteStore:
    """In-memory note maps kept in sync with the local cache and remote store."""

    def __init__(
        self,
        local_cache: LocalCache,
        remote_store: RemoteStore,
        acknowledgements: Optional[SaveAcknowledgements] = None,
        cache_key: str = LOCAL_CACHE_KEY,
    ):
        self._local_cache = local_cache
        self._remote_store = remote_store
        self._acks = acknowledgements or SaveAcknowledgements()
        self._cache_key = cache_key
        self._questions: NoteMap = {}
        self._reflections: NoteMap = {}
        self._hydrated = False
        self._lock = threading.RLock()

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    @property
    def remote_enabled(self) -> bool:
        return self._remote_store.enabled

    @property
    def acknowledgements(self) -> SaveAcknowledgements:
        return self._acks

    # === Hydration ===

    def hydrate(self) -> None:
        with self._lock:
            if self._hydrated:
                return

            questions, reflections = merge_local_snapshot(self._local_cache.get(self._cache_key))

            if self._remote_store.enabled:
                try:
                    rows = self._remote_store.fetch_rows()
                except RemoteStoreError:
                    logger.warning("Remote sync skipped during hydration", exc_info=True)
                else:
                    questions, reflections = fold_remote_rows(questions, reflections, rows)
                    logger.info("Merged %d remote note rows", len(rows))

            self._questions = questions
            self._reflections = reflections
            self._hydrated = True
            self._write_local()
            logger.info(
                "Notes hydrated: %d questions, %d reflections",
                len(self._questions),
                len(self._reflections),
            )

    # === Reads ===

    def snapshot(self) -> Tuple[NoteMap, NoteMap]:
        with self._lock:
            return dict(self._questions), dict(self._reflections)

    def get_note(self, strategy_id: str) -> PersistedNote:
        with self._lock:
            return PersistedNote(
                strategy_id=strategy_id,
                question=self._questions.get(strategy_id, ""),
                reflection=self._reflections.get(strategy_id, ""),
            )

    def is_acknowledged(self, strategy_id: str, field: NoteField) -> bool:
        return self._acks.is_set(strategy_id, field)

    # === In-memory edits ===

    def set_field(self, strategy_id: str, field: NoteField, text: str) -> None:
        with self._lock:
            self._require_hydrated()
            self._map_for(field)[strategy_id] = text
            self._write_local()

    def set_question(self, strategy_id: str, text: str) -> None:
        self.set_field(strategy_id, NoteField.question, text)

    def set_reflection(self, strategy_id: str, text: str) -> None:
        self.set_field(strategy_id, NoteField.reflection, text)

    def clear_question(self, strategy_id: str) -> None:
        self.set_field(strategy_id, NoteField.question, "")

    # === Explicit save ===

    def save(self, strategy_id: str, field: NoteField) -> SaveOutcome:
        field = NoteField(field)
        with self._lock:
            self._require_hydrated()
            value = self._map_for(field).get(strategy_id, "")

        remote_synced = False
        if self._remote_store.enabled:
            try:
                self._remote_store.upsert_field(strategy_id, field, value)
                remote_synced = True
            except RemoteStoreError:
                logger.error("Database save failed for %s %s", strategy_id, field.value, exc_info=True)

        # The acknowledgement reports an attempted save, not a confirmed one
        self._acks.mark(strategy_id, field)

        with self._lock:
            self._write_local()

        return SaveOutcome(
            strategy_id=strategy_id,
            field=field,
            remote_synced=remote_synced,
            storage="cloud" if self._remote_store.enabled else "local",
        )

    # === Internals ===

    def _require_hydrated(self) -> None:
        if not self._hydrated:
            raise NotesNotReadyError("Notes are still loading")

    def _map_for(self, field: NoteField) -> NoteMap:
        return self._questions if NoteField(field) is NoteField.question else self._reflections

    def _write_local(self) -> None:
        blob = json.dumps({"questions": self._questions, "reflections": self._reflections})
        try:
            self._local_cache.set(self._cache_key, blob)
        except OSError:
            logger.error("Writing the local note cache failed", exc_info=True)
