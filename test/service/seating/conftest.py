"""Seating fixtures shared by domain and use case tests."""

import pytest

from src.platform.config.di import Container
from src.service.seating.domain.inventory import Inventory, generate_inventory
from src.service.seating.domain.services.booking_service import BookingService
from src.service.seating.domain.services.seat_allocator import SeatAllocator
from src.service.seating.domain.services.seat_status_mutator import SeatStatusMutator
from src.service.seating.domain.value_object import DEFAULT_LAYOUT
from src.service.seating.driven_adapter.state.in_memory_coach_state_store import (
    InMemoryCoachStateStoreImpl,
)


@pytest.fixture
def inventory() -> Inventory:
    return generate_inventory(DEFAULT_LAYOUT)


@pytest.fixture
def mutator() -> SeatStatusMutator:
    return SeatStatusMutator()


@pytest.fixture
def allocator() -> SeatAllocator:
    return SeatAllocator(max_party_size=7)


@pytest.fixture
def booking_service(mutator: SeatStatusMutator) -> BookingService:
    return BookingService(mutator=mutator, max_party_size=7)


@pytest.fixture
def state_store() -> InMemoryCoachStateStoreImpl:
    return InMemoryCoachStateStoreImpl(layout=DEFAULT_LAYOUT)


@pytest.fixture
def di_container() -> Container:
    return Container()
