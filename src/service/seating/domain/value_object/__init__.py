"""Seating Domain Value Objects"""

from src.service.seating.domain.value_object.coach_layout import DEFAULT_LAYOUT, CoachLayout

__all__ = ['CoachLayout', 'DEFAULT_LAYOUT']
