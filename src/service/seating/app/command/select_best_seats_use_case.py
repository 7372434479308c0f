"""
Select Best Seats Use Case

Replaces the pending selection with the allocator's pick for a party of `count`.
"""

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import InvalidSelectionError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto import SeatSelectionResult
from src.service.seating.app.interface import ICoachStateStore
from src.service.seating.domain.enum import SeatStatus
from src.service.seating.domain.services.seat_allocator import SeatAllocator
from src.service.seating.domain.services.seat_status_mutator import SeatStatusMutator


class SelectBestSeatsUseCase:
    def __init__(
        self,
        *,
        state_store: ICoachStateStore,
        allocator: SeatAllocator,
        mutator: SeatStatusMutator,
        max_party_size: int = settings.MAX_PARTY_SIZE,
    ) -> None:
        self.state_store = state_store
        self.allocator = allocator
        self.mutator = mutator
        self.max_party_size = max_party_size

    @Logger.io
    def execute(self, *, count: int) -> SeatSelectionResult:
        """
        Pick `count` seats and make them the pending selection.

        Seats held by the previous pending selection count as free for the new
        pick. When the coach cannot seat the party the result is unsuccessful and
        the stored state is left as it was.

        Raises:
            InvalidSelectionError: `count` is outside 1..max_party_size
        """
        if not 1 <= count <= self.max_party_size:
            raise InvalidSelectionError(
                f'Number of seats must be between 1 and {self.max_party_size}, got {count}'
            )

        state = self.state_store.load()
        # A new pick replaces the old one, so its seats may be picked again
        cleared =self.mutator.apply_status(
            inventory=state.inventory,
            seat_ids=state.pending_selection,
            status=SeatStatus.AVAILABLE,
        )

        best_seats = self.allocator.find_best_seats(inventory=cleared, count=count)
        if not best_seats:
            Logger.base.info(f'[SELECTION] Cannot seat a party of {count}')
            return SeatSelectionResult(
                success=False,
                error_message=(
                    f'Not enough seats available for {count} passengers. '
                    'Please select a smaller number.'
                ),
            )

        seat_ids = tuple(seat.id for seat in best_seats)
        inventory = self.mutator.apply_status(
            inventory=cleared, seat_ids=seat_ids, status=SeatStatus.SELECTED
        )
        self.state_store.save(
            state=state.evolve(inventory=inventory, pending_selection=seat_ids),
            expected_version=state.version,
        )

        selected = tuple(inventory.seats[i - 1] for i in seat_ids)
        Logger.base.info(
            f'[SELECTION] Selected {", ".join(seat.label for seat in selected)} for {count}'
        )
        return SeatSelectionResult(success=True, selected_seats=selected)
