"""Seating use case results."""

from typing import Optional

import attrs

from src.service.seating.domain.booking_entity import Booking
from src.service.seating.domain.seat_entity import Seat


@attrs.define(frozen=True)
class SeatSelectionResult:
    """Outcome of changing the pending selection"""

    success: bool
    selected_seats: tuple[Seat, ...] = ()
    error_message: Optional[str] = None

    @property
    def selected_labels(self) -> tuple[str, ...]:
        return tuple(seat.label for seat in self.selected_seats)


@attrs.define(frozen=True)
class BookingResult:
    booking: Booking
    available_count: int


@attrs.define(frozen=True)
class SeatMapView:
    """Read model for rendering collaborators"""

    rows: tuple[tuple[Seat, ...], ...]
    available_count: int
    total_seats: int
    pending_selection: tuple[Seat, ...]
