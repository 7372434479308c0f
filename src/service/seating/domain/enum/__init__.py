"""Seating Domain Enums"""

from src.service.seating.domain.enum.seat_status import SeatStatus

__all__ = ['SeatStatus']
