"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.seating.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.seating.app.command.clear_selection_use_case import ClearSelectionUseCase
from src.service.seating.app.command.confirm_booking_use_case import ConfirmBookingUseCase
from src.service.seating.app.command.select_best_seats_use_case import SelectBestSeatsUseCase
from src.service.seating.app.command.toggle_seat_selection_use_case import (
    ToggleSeatSelectionUseCase,
)
from src.service.seating.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.seating.app.query.list_user_bookings_use_case import ListUserBookingsUseCase
from src.service.seating.domain.services.booking_service import BookingService
from src.service.seating.domain.services.seat_allocator import SeatAllocator
from src.service.seating.domain.services.seat_status_mutator import SeatStatusMutator
from src.service.seating.domain.value_object import CoachLayout
from src.service.seating.driven_adapter.state.in_memory_coach_state_store import (
    InMemoryCoachStateStoreImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    coach_layout = providers.Singleton(
        CoachLayout,
        full_rows=config_service.provided.COACH_FULL_ROWS,
        seats_per_row=config_service.provided.COACH_SEATS_PER_ROW,
        last_row_seats=config_service.provided.COACH_LAST_ROW_SEATS,
    )
    max_party_size = config_service.provided.MAX_PARTY_SIZE

    # Domain services (stateless)
    seat_status_mutator = providers.Singleton(SeatStatusMutator)
    seat_allocator = providers.Singleton(SeatAllocator, max_party_size=max_party_size)
    booking_service = providers.Singleton(
        BookingService, mutator=seat_status_mutator, max_party_size=max_party_size
    )

    # Session state (one coach, one writer)
    coach_state_store = providers.Singleton(InMemoryCoachStateStoreImpl, layout=coach_layout)

    # Command use cases
    toggle_seat_selection_use_case = providers.Factory(
        ToggleSeatSelectionUseCase,
        state_store=coach_state_store,
        mutator=seat_status_mutator,
        max_party_size=max_party_size,
    )
    select_best_seats_use_case = providers.Factory(
        SelectBestSeatsUseCase,
        state_store=coach_state_store,
        allocator=seat_allocator,
        mutator=seat_status_mutator,
        max_party_size=max_party_size,
    )
    clear_selection_use_case = providers.Factory(
        ClearSelectionUseCase, state_store=coach_state_store, mutator=seat_status_mutator
    )
    confirm_booking_use_case = providers.Factory(
        ConfirmBookingUseCase, state_store=coach_state_store, booking_service=booking_service
    )
    cancel_booking_use_case = providers.Factory(
        CancelBookingUseCase, state_store=coach_state_store, booking_service=booking_service
    )

    # Query use cases
    get_seat_map_use_case = providers.Factory(GetSeatMapUseCase, state_store=coach_state_store)
    list_user_bookings_use_case = providers.Factory(
        ListUserBookingsUseCase, state_store=coach_state_store
    )


container = Container()
