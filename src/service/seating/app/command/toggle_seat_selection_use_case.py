"""
Toggle Seat Selection Use Case

Handles a click on one seat of the seat map: an available seat joins the pending
selection, a selected seat leaves it, a booked seat is refused.
"""

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import ConflictError, InvalidSelectionError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto import SeatSelectionResult
from src.service.seating.app.interface import ICoachStateStore
from src.service.seating.domain.enum import SeatStatus
from src.service.seating.domain.services.seat_status_mutator import SeatStatusMutator


class ToggleSeatSelectionUseCase:
    def __init__(
        self,
        *,
        state_store: ICoachStateStore,
        mutator: SeatStatusMutator,
        max_party_size: int = settings.MAX_PARTY_SIZE,
    ) -> None:
        self.state_store = state_store
        self.mutator = mutator
        self.max_party_size = max_party_size

    @Logger.io
    def execute(self, *, seat_id: int) -> SeatSelectionResult:
        state = self.state_store.load()
        seat = state.inventory.get(seat_id)
        if seat is None:
            raise NotFoundError(f'Seat {seat_id} not found')

        if seat.status is SeatStatus.BOOKED:
            raise ConflictError(f'Seat {seat.label} is already booked')

        if seat.status is SeatStatus.SELECTED:
            new_status = SeatStatus.AVAILABLE
            pending = tuple(i for i in state.pending_selection if i != seat_id)
        else:
            if len(state.pending_selection) >= self.max_party_size:
                raise InvalidSelectionError(
                    f'You can only select up to {self.max_party_size} seats per booking'
                )
            new_status = SeatStatus.SELECTED
            pending = (*state.pending_selection, seat_id)

        inventory = self.mutator.apply_status(
            inventory=state.inventory, seat_ids=[seat_id], status=new_status
        )
        self.state_store.save(
            state=state.evolve(inventory=inventory, pending_selection=pending),
            expected_version=state.version,
        )

        Logger.base.info(f'[SELECTION] Seat {seat.label} -> {new_status}')
        return SeatSelectionResult(
            success=True, selected_seats=tuple(inventory.seats[i - 1] for i in pending)
        )
