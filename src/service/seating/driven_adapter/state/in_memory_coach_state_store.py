"""
In-memory Coach State Store Implementation

Single process, single writer. The lock only guards the version compare-and-swap;
use cases still compute new snapshots outside of it.
"""

from threading import Lock

import attrs

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface import ICoachStateStore
from src.service.seating.domain.coach_state import CoachState
from src.service.seating.domain.value_object import CoachLayout


class InMemoryCoachStateStoreImpl(ICoachStateStore):
    def __init__(self, *, layout: CoachLayout) -> None:
        self._layout = layout
        self._lock = Lock()
        self._state = CoachState.initial(layout=layout)

    def load(self) -> CoachState:
        return self._state

    @Logger.io
    def save(self, *, state: CoachState, expected_version: int) -> CoachState:
        with self._lock:
            if self._state.version != expected_version:
                raise ConflictError(
                    f'Coach state changed (version {self._state.version}, '
                    f'expected {expected_version}), please retry'
                )
            self._state = state
        Logger.base.debug(f'[STATE-STORE] Saved coach state version {state.version}')
        return state

    @Logger.io
    def reset(self) -> CoachState:
        with self._lock:
            # Keeps counting up so snapshots loaded before the reset stay stale
            self._state = attrs.evolve(
                CoachState.initial(layout=self._layout), version=self._state.version + 1
            )
        return self._state
