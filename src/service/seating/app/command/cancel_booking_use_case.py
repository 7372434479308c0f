"""
Cancel Booking Use Case

Releases a booking's seats back to available and removes it from the ledger.
"""

from typing import Optional

from uuid_utils import UUID

from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface import ICoachStateStore
from src.service.seating.domain.booking_entity import Booking
from src.service.seating.domain.services.booking_service import BookingService
from src.service.seating.domain.user_entity import User


class CancelBookingUseCase:
    def __init__(self, *, state_store: ICoachStateStore, booking_service: BookingService) -> None:
        self.state_store = state_store
        self.booking_service = booking_service

    @staticmethod
    def _parse_booking_id(booking_id: UUID | str) -> UUID:
        if isinstance(booking_id, UUID):
            return booking_id
        try:
            return UUID(str(booking_id))
        except (TypeError, ValueError):
            raise NotFoundError(f'Booking {booking_id} not found')

    @Logger.io
    def execute(self, *, booking_id: UUID | str, user: Optional[User] = None) -> Booking:
        """
        Cancel `booking_id` and return the cancelled Booking.

        When `user` is given only their own bookings can be cancelled.

        Raises:
            NotFoundError: unknown booking id
            ForbiddenError: booking belongs to another user
        """
        booking_uuid = self._parse_booking_id(booking_id)
        state = self.state_store.load()

        booking = state.ledger.find(booking_uuid)
        if booking is None:
            raise NotFoundError(f'Booking {booking_id} not found')
        if user is not None and booking.user_id != user.id:
            raise ForbiddenError('You can only cancel your own bookings')

        inventory, ledger = self.booking_service.cancel(
            inventory=state.inventory, ledger=state.ledger, booking_id=booking_uuid
        )
        self.state_store.save(
            state=state.evolve(inventory=inventory, ledger=ledger),
            expected_version=state.version,
        )
        return booking
