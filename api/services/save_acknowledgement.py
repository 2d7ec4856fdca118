"""Transient "saved" flags that clear themselves a few seconds after a save."""

from __future__ import annotations

import threading
from typing import Callable, Dict, Tuple

from api.schemas.note import NoteField

AckKey = Tuple[str, NoteField]


class SaveAcknowledgements:
    """Per (strategy, field) flags set by a save and reset by a timer.

    A new save for the same key cancels the pending reset, so the flag always
    clears `hold_seconds` after the most recent save.
    """

    def __init__(
        self,
        hold_seconds: float = 3.0,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self._hold_seconds = hold_seconds
        self._timer_factory = timer_factory
        self._flags: Dict[AckKey, bool] = {}
        self._timers: Dict[AckKey, threading.Timer] = {}
        self._generation: Dict[AckKey, int] = {}
        self._lock = threading.Lock()

    @property
    def hold_seconds(self) -> float:
        return self._hold_seconds

    def mark(self, strategy_id: str, field: NoteField) -> None:
        key = (strategy_id, NoteField(field))
        with self._lock:
            previous = self._timers.pop(key, None)
            if previous is not None:
                previous.cancel()
            generation = self._generation.get(key, 0) + 1
            self._generation[key] = generation
            self._flags[key] = True

            timer = self._timer_factory(self._hold_seconds, self._clear, args=(key, generation))
            timer.daemon = True
            self._timers[key] = timer
        timer.start()

    def _clear(self, key: AckKey, generation: int) -> None:
        with self._lock:
            # A cancelled timer can still fire if it was already running
            if self._generation.get(key) != generation:
                return
            self._flags[key] = False
            self._timers.pop(key, None)

    def is_set(self, strategy_id: str, field: NoteField) -> bool:
        with self._lock:
            return self._flags.get((strategy_id, NoteField(field)), False)

    def active(self) -> Dict[AckKey, bool]:
        with self._lock:
            return {key: flag for key, flag in self._flags.items() if flag}

    def shutdown(self) -> None:
        with self._lock:
            for timer in self._timers.values():
                timer.cancel()
            self._timers.clear()
