from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface import ICoachStateStore
from src.service.seating.domain.booking_entity import Booking
from src.service.seating.domain.user_entity import User


class ListUserBookingsUseCase:
    def __init__(self, *, state_store: ICoachStateStore) -> None:
        self.state_store = state_store

    @Logger.io
    def execute(self, *, user: User) -> tuple[Booking, ...]:
        """Bookings owned by `user`, newest first"""
        bookings = self.state_store.load().ledger.for_user(user.id)
        # Ledger order breaks ties between bookings made within the same tick
        ordered = sorted(enumerate(bookings), key=lambda item: (item[1].created_at, item[0]))
        return tuple(booking for _, booking in reversed(ordered))
