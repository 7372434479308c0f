"""Seating Application DTOs"""

from src.service.seating.app.dto.seating_dto import BookingResult, SeatMapView, SeatSelectionResult

__all__ = ['BookingResult', 'SeatMapView', 'SeatSelectionResult']
