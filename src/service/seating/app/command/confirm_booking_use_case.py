"""
Confirm Booking Use Case

Turns the pending selection into a Booking owned by the current user.
"""

from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto import BookingResult
from src.service.seating.app.interface import ICoachStateStore
from src.service.seating.domain.services.booking_service import BookingService
from src.service.seating.domain.user_entity import User


class ConfirmBookingUseCase:
    def __init__(self, *, state_store: ICoachStateStore, booking_service: BookingService) -> None:
        self.state_store = state_store
        self.booking_service = booking_service

    @Logger.io
    def execute(self, *, user: Optional[User]) -> BookingResult:
        """
        Raises:
            InvalidSelectionError: nothing selected or no user logged in
            ConflictError: a selected seat got booked meanwhile, or the state changed
        """
        state = self.state_store.load()
        inventory, booking = self.booking_service.confirm(
            inventory=state.inventory, seat_ids=state.pending_selection, user=user
        )
        self.state_store.save(
            state=state.evolve(
                inventory=inventory,
                ledger=state.ledger.record(booking),
                pending_selection=(),
            ),
            expected_version=state.version,
        )
        return BookingResult(booking=booking, available_count=inventory.count_available())
