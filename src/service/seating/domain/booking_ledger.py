"""
Booking Ledger

Append/remove record of confirmed bookings. Like Inventory it is an immutable
snapshot: `record` and `remove` return a new ledger.
"""

from typing import Iterator, Optional
import uuid

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.service.seating.domain.booking_entity import Booking


def _as_booking_id(booking_id: object) -> object:
    # Booking ids are uuid_utils.UUID; a stdlib uuid.UUID never compares equal to one
    if isinstance(booking_id, uuid.UUID):
        return UUID(str(booking_id))
    return booking_id


@attrs.define(frozen=True)
class BookingLedger:
    bookings: tuple[Booking, ...] = attrs.field(factory=tuple, converter=tuple)

    def __len__(self) -> int:
        return len(self.bookings)

    def __iter__(self) -> Iterator[Booking]:
        return iter(self.bookings)

    def __contains__(self, booking_id: object) -> bool:
        return self.find(booking_id) is not None

    def find(self, booking_id: object) -> Optional[Booking]:
        booking_id = _as_booking_id(booking_id)
        return next((booking for booking in self.bookings if booking.id == booking_id), None)

    def get(self, booking_id: UUID | uuid.UUID) -> Booking:
        if (booking := self.find(booking_id)) is None:
            raise NotFoundError(f'Booking {booking_id} not found')
        return booking

    def record(self, booking: Booking) -> 'BookingLedger':
        if booking.id in self:
            raise ConflictError(f'Booking {booking.id} is already recorded')
        return attrs.evolve(self, bookings=(*self.bookings, booking))

    def remove(self, booking_id: UUID | uuid.UUID) -> 'BookingLedger':
        booking = self.get(booking_id)
        return attrs.evolve(
            self, bookings=tuple(b for b in self.bookings if b.id != booking.id)
        )

    def for_user(self, user_id: str) -> tuple[Booking, ...]:
        return tuple(booking for booking in self.bookings if booking.user_id == user_id)
