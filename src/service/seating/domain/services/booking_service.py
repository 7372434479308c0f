"""
Booking Service

Confirms a seat selection into a Booking and cancels Bookings, keeping the
Inventory (authoritative seat status) and the BookingLedger consistent. All
seat changes go through SeatStatusMutator.
"""

from collections.abc import Sequence
from typing import Optional
import uuid

from uuid_utils import UUID

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import ConflictError, InvalidSelectionError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.booking_entity import Booking
from src.service.seating.domain.booking_ledger import BookingLedger
from src.service.seating.domain.enum import SeatStatus
from src.service.seating.domain.inventory import Inventory
from src.service.seating.domain.services.seat_status_mutator import SeatStatusMutator
from src.service.seating.domain.user_entity import User


class BookingService:
    def __init__(
        self,
        *,
        mutator: SeatStatusMutator,
        max_party_size: int = settings.MAX_PARTY_SIZE,
    ) -> None:
        self.mutator = mutator
        self.max_party_size = max_party_size

    def _validate_selection(self, *, inventory: Inventory, seat_ids: Sequence[int]) -> None:
        if not seat_ids:
            raise InvalidSelectionError('Please select at least one seat to book')
        if len(seat_ids) > self.max_party_size:
            raise InvalidSelectionError(
                f'You can only book up to {self.max_party_size} seats per booking'
            )

        seats = {seat_id: inventory.get(seat_id) for seat_id in seat_ids}
        unknown = [seat_id for seat_id, seat in seats.items() if seat is None]
        if unknown:
            raise InvalidSelectionError(f'Unknown seat ids: {unknown}')

        booked = [
            seat.label
            for seat in seats.values()
            if seat is not None and seat.status is SeatStatus.BOOKED
        ]
        if booked:
            raise ConflictError(f'Seats already booked: {", ".join(booked)}')

    @Logger.io
    def confirm(
        self, *, inventory: Inventory, seat_ids: Sequence[int], user: Optional[User]
    ) -> tuple[Inventory, Booking]:
        """
        Book `seat_ids` for `user`.

        Seats must currently be selected or available. The returned Booking holds
        the seats as they look right after booking.

        Raises:
            InvalidSelectionError: no seats, no user, too many or unknown seats
            ConflictError: one of the seats is already booked
        """
        if user is None:
            raise InvalidSelectionError('Please log in to confirm your booking')
        # Preserve the caller's order while dropping repeated ids
        seat_ids = tuple(dict.fromkeys(seat_ids))
        self._validate_selection(inventory=inventory, seat_ids=seat_ids)

        booking_id = Booking.next_id()
        updated = self.mutator.apply_status(
            inventory=inventory,
            seat_ids=seat_ids,
            status=SeatStatus.BOOKED,
            user_id=user.id,
            booking_id=booking_id,
        )
        booking = Booking.create(
            booking_id=booking_id,
            user_id=user.id,
            seats=tuple(updated.get(seat_id) for seat_id in sorted(seat_ids)),
        )

        Logger.base.info(
            f'[BOOKING] {booking.id} confirmed for user {user.id}: {", ".join(booking.seat_labels)}'
        )
        return updated, booking

    @Logger.io
    def cancel(
        self, *, inventory: Inventory, ledger: BookingLedger, booking_id: UUID | uuid.UUID
    ) -> tuple[Inventory, BookingLedger]:
        """
        Release the booking's seats and drop it from the ledger.

        Raises:
            NotFoundError: no booking with `booking_id` (inputs stay untouched)
        """
        booking = ledger.find(booking_id)
        if booking is None:
            raise NotFoundError(f'Booking {booking_id} not found')

        updated = self.mutator.apply_status(
            inventory=inventory, seat_ids=booking.seat_ids, status=SeatStatus.AVAILABLE
        )
        Logger.base.info(f'[BOOKING] {booking.id} cancelled, released {len(booking.seats)} seats')
        return updated, ledger.remove(booking.id)
