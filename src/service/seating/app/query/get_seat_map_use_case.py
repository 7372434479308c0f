"""
Get Seat Map Use Case

Current seat map grouped by row, for rendering collaborators.
"""

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto import SeatMapView
from src.service.seating.app.interface import ICoachStateStore


class GetSeatMapUseCase:
    def __init__(self, *, state_store: ICoachStateStore) -> None:
        self.state_store = state_store

    @Logger.io
    def execute(self) -> SeatMapView:
        state = self.state_store.load()
        inventory = state.inventory
        return SeatMapView(
            rows=inventory.by_row(),
            available_count=inventory.count_available(),
            total_seats=len(inventory),
            pending_selection=tuple(inventory.seats[i - 1] for i in state.pending_selection),
        )
