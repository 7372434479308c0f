"""
Seat Inventory

Immutable snapshot of every seat of one coach. A new Inventory is produced for every
status change (see SeatStatusMutator); nothing edits a snapshot in place.
"""

from typing import Iterator, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.enum import SeatStatus
from src.service.seating.domain.seat_entity import Seat
from src.service.seating.domain.value_object import CoachLayout


def _matches_layout(instance: 'Inventory', attribute: attrs.Attribute, seats: tuple) -> None:
    expected = list(instance.layout.iter_positions())
    if len(seats) != len(expected):
        raise DomainError(
            f'Inventory must hold {len(expected)} seats for this layout, got {len(seats)}'
        )
    for seat_id, (seat, (row, position)) in enumerate(zip(seats, expected, strict=True), start=1):
        if seat.id != seat_id or seat.row != row or seat.position != position:
            raise DomainError(
                f'Seat {seat.id} at {seat.label} breaks the layout '
                f'(expected seat {seat_id} at {row}-{position})'
            )


@attrs.define(frozen=True)
class Inventory:
    layout: CoachLayout = attrs.field(validator=attrs.validators.instance_of(CoachLayout))
    seats: tuple[Seat, ...] = attrs.field(converter=tuple, validator=_matches_layout)

    def __len__(self) -> int:
        return len(self.seats)

    def __iter__(self) -> Iterator[Seat]:
        return iter(self.seats)

    def get(self, seat_id: int) -> Optional[Seat]:
        # ids are the contiguous range 1..N in layout order
        if 1 <= seat_id <= len(self.seats):
            return self.seats[seat_id - 1]
        return None

    def available_seats(self) -> tuple[Seat, ...]:
        return self.seats_with_status(SeatStatus.AVAILABLE)

    def seats_with_status(self, status: SeatStatus) -> tuple[Seat, ...]:
        return tuple(seat for seat in self.seats if seat.status is status)

    def count_available(self) -> int:
        return sum(1 for seat in self.seats if seat.is_available)

    def is_seat_available(self, seat_id: int) -> bool:
        seat = self.get(seat_id)
        return seat is not None and seat.is_available

    def seats_in_row(self, row: int) -> tuple[Seat, ...]:
        return tuple(seat for seat in self.seats if seat.row == row)

    def by_row(self) -> tuple[tuple[Seat, ...], ...]:
        """Seats grouped per row, front row first"""
        return tuple(self.seats_in_row(row) for row in self.layout.rows)


@Logger.io
def generate_inventory(layout: Optional[CoachLayout] = None) -> Inventory:
    """
    Build the coach's seats, all available and unowned.

    This is the only place seats are created. Ids run 1..N front to back,
    left to right, so the default 11x7 + 1x3 layout yields seats 1..80.
    """
    layout = layout or CoachLayout.from_settings()
    seats = [
        Seat(id=seat_id, row=row, position=position)
        for seat_id, (row, position) in enumerate(layout.iter_positions(), start=1)
    ]
    Logger.base.info(
        f'[INVENTORY] Generated {len(seats)} seats across {layout.total_rows} rows'
    )
    return Inventory(layout=layout, seats=seats)
