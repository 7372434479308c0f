"""
Seat Allocator

Chooses seats for a party using row affinity:
1. Same row if possible (lowest row that still fits the whole party)
2. Otherwise the front-most available seats in (row, position) order
"""

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.inventory import Inventory
from src.service.seating.domain.seat_entity import Seat


class SeatAllocator:
    """
    Read-only query over an Inventory snapshot.

    An empty result means the party cannot be seated (bad size or not enough
    capacity); callers branch on it instead of catching an exception.
    """

    def __init__(self, *, max_party_size: int = settings.MAX_PARTY_SIZE) -> None:
        self.max_party_size = max_party_size

    @Logger.io
    def find_best_seats(self, *, inventory: Inventory, count: int) -> tuple[Seat, ...]:
        if count <= 0 or count > self.max_party_size:
            Logger.base.warning(
                f'[SEAT-ALLOCATOR] Party size {count} outside 1..{self.max_party_size}'
            )
            return ()

        available = inventory.available_seats()
        if len(available) < count:
            Logger.base.info(
                f'[SEAT-ALLOCATOR] Only {len(available)} seats available, {count} requested'
            )
            return ()

        for row in inventory.layout.rows:
            row_seats = sorted(
                (seat for seat in available if seat.row == row), key=lambda s: s.position
            )
            if len(row_seats) >= count:
                Logger.base.debug(f'[SEAT-ALLOCATOR] Seating {count} together in row {row}')
                return tuple(row_seats[:count])

        # No single row fits: nearest seats by sort order, not verified adjacency
        fallback = sorted(available, key=lambda s: s.sort_key)[:count]
        Logger.base.debug(
            f'[SEAT-ALLOCATOR] No row fits {count}, spreading over '
            f'{", ".join(seat.label for seat in fallback)}'
        )
        return tuple(fallback)
