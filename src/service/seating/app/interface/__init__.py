"""Seating Application Interfaces"""

from src.service.seating.app.interface.i_coach_state_store import ICoachStateStore

__all__ = ['ICoachStateStore']
