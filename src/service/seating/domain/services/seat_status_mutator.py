"""
Seat Status Mutator

The single path through which any seat changes status. Keeping every transition
here is what lets Seat's owner invariant hold: booked seats always carry both
user_id and booking_id, every other seat carries neither.
"""

from collections.abc import Iterable
from typing import Optional

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.enum import SeatStatus
from src.service.seating.domain.inventory import Inventory


class SeatStatusMutator:
    @staticmethod
    @Logger.io
    def apply_status(
        *,
        inventory: Inventory,
        seat_ids: Iterable[int],
        status: SeatStatus,
        user_id: Optional[str] = None,
        booking_id: Optional[UUID] = None,
    ) -> Inventory:
        """
        Return a new Inventory where every seat named in `seat_ids` has `status`.

        Seats not named are carried over as the same objects. Ids that do not exist
        in the inventory are ignored.

        Raises:
            DomainError: `status` is booked but `user_id` or `booking_id` is missing
        """
        status = SeatStatus(status)
        if status is SeatStatus.BOOKED:
            if user_id is None or booking_id is None:
                raise DomainError('Booking seats requires both user_id and booking_id')
        else:
            # Released or selected seats never keep an owner
            user_id, booking_id = None, None

        targets = set(seat_ids)
        seats = tuple(
            attrs.evolve(seat, status=status, user_id=user_id, booking_id=booking_id)
            if seat.id in targets
            else seat
            for seat in inventory.seats
        )
        return attrs.evolve(inventory, seats=seats)
