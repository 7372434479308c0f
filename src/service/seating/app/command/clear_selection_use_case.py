"""
Clear Selection Use Case

Returns every seat of the pending selection to available, e.g. on logout.
"""

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto import SeatSelectionResult
from src.service.seating.app.interface import ICoachStateStore
from src.service.seating.domain.enum import SeatStatus
from src.service.seating.domain.services.seat_status_mutator import SeatStatusMutator


class ClearSelectionUseCase:
    def __init__(self, *, state_store: ICoachStateStore, mutator: SeatStatusMutator) -> None:
        self.state_store = state_store
        self.mutator = mutator

    @Logger.io
    def execute(self) -> SeatSelectionResult:
        state = self.state_store.load()
        if not state.pending_selection:
            return SeatSelectionResult(success=True)

        inventory = self.mutator.apply_status(
            inventory=state.inventory,
            seat_ids=state.pending_selection,
            status=SeatStatus.AVAILABLE,
        )
        self.state_store.save(
            state=state.evolve(inventory=inventory, pending_selection=()),
            expected_version=state.version,
        )
        Logger.base.info(f'[SELECTION] Released {len(state.pending_selection)} pending seats')
        return SeatSelectionResult(success=True)
