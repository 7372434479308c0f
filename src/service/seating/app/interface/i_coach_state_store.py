"""
Coach State Store Interface

Holds the current CoachState of the session. Saves are optimistic: a save
built on an outdated snapshot is rejected instead of overwriting newer state.
"""

from abc import ABC, abstractmethod

from src.service.seating.domain.coach_state import CoachState


class ICoachStateStore(ABC):
    @abstractmethod
    def load(self) -> CoachState:
        """Return the current snapshot"""
        pass

    @abstractmethod
    def save(self, *, state: CoachState, expected_version: int) -> CoachState:
        """
        Replace the current snapshot with `state`

        Args:
            state: New snapshot
            expected_version: Version of the snapshot `state` was derived from

        Raises:
            ConflictError: the stored version is no longer `expected_version`
        """
        pass

    @abstractmethod
    def reset(self) -> CoachState:
        """Drop all bookings and selections, starting from a fresh inventory.

        The version keeps increasing across a reset.
        """
        pass
