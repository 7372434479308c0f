"""
Unit tests for SeatStatusMutator

Every transition must leave booked seats with both owner fields and all other
seats with none.
"""

import pytest
from uuid_utils import uuid7

from src.platform.exception.exceptions import DomainError
from src.service.seating.domain.enum import SeatStatus
from src.service.seating.domain.inventory import Inventory
from src.service.seating.domain.services.seat_status_mutator import SeatStatusMutator


class TestApplyStatus:
    @pytest.mark.unit
    def test_books_named_seats_with_owner(
        self, mutator: SeatStatusMutator, inventory: Inventory
    ):
        booking_id = uuid7()

        updated = mutator.apply_status(
            inventory=inventory,
            seat_ids=[3, 4],
            status=SeatStatus.BOOKED,
            user_id='user-1',
            booking_id=booking_id,
        )

        for seat_id in (3, 4):
            seat = updated.get(seat_id)
            assert seat.status is SeatStatus.BOOKED
            assert seat.user_id == 'user-1'
            assert seat.booking_id == booking_id

    @pytest.mark.unit
    def test_returns_new_inventory_and_keeps_input(
        self, mutator: SeatStatusMutator, inventory: Inventory
    ):
        updated = mutator.apply_status(
            inventory=inventory, seat_ids=[1], status=SeatStatus.SELECTED
        )

        assert updated is not inventory
        assert inventory.get(1).status is SeatStatus.AVAILABLE
        assert updated.get(1).status is SeatStatus.SELECTED

    @pytest.mark.unit
    def test_untouched_seats_are_shared(self, mutator: SeatStatusMutator, inventory: Inventory):
        updated = mutator.apply_status(
            inventory=inventory, seat_ids=[1], status=SeatStatus.SELECTED
        )

        assert all(updated.get(i) is inventory.get(i) for i in range(2, 81))

    @pytest.mark.unit
    @pytest.mark.parametrize('missing', ['user_id', 'booking_id'])
    def test_booking_without_owner_is_rejected(
        self, mutator: SeatStatusMutator, inventory: Inventory, missing: str
    ):
        owner = {'user_id': 'user-1', 'booking_id': uuid7()}
        owner[missing] = None

        with pytest.raises(DomainError):
            mutator.apply_status(
                inventory=inventory, seat_ids=[1], status=SeatStatus.BOOKED, **owner
            )

    @pytest.mark.unit
    @pytest.mark.parametrize('status', [SeatStatus.AVAILABLE, SeatStatus.SELECTED])
    def test_non_booked_status_clears_owner_even_if_passed(
        self, mutator: SeatStatusMutator, inventory: Inventory, status: SeatStatus
    ):
        booked = mutator.apply_status(
            inventory=inventory,
            seat_ids=[5],
            status=SeatStatus.BOOKED,
            user_id='user-1',
            booking_id=uuid7(),
        )

        released = mutator.apply_status(
            inventory=booked,
            seat_ids=[5],
            status=status,
            user_id='user-1',
            booking_id=uuid7(),
        )

        seat = released.get(5)
        assert seat.status is status
        assert seat.user_id is None
        assert seat.booking_id is None

    @pytest.mark.unit
    def test_unknown_ids_are_ignored(self, mutator: SeatStatusMutator, inventory: Inventory):
        updated = mutator.apply_status(
            inventory=inventory, seat_ids=[2, 999], status=SeatStatus.SELECTED
        )

        assert [s.id for s in updated.seats_with_status(SeatStatus.SELECTED)] == [2]

    @pytest.mark.unit
    def test_no_seat_ever_breaks_owner_invariant(
        self, mutator: SeatStatusMutator, inventory: Inventory
    ):
        inventory = mutator.apply_status(
            inventory=inventory,
            seat_ids=range(1, 15),
            status=SeatStatus.BOOKED,
            user_id='user-1',
            booking_id=uuid7(),
        )
        inventory = mutator.apply_status(
            inventory=inventory, seat_ids=range(10, 20), status=SeatStatus.SELECTED
        )
        inventory = mutator.apply_status(
            inventory=inventory, seat_ids=range(5, 12), status=SeatStatus.AVAILABLE
        )

        for seat in inventory:
            has_owner = seat.user_id is not None and seat.booking_id is not None
            no_owner = seat.user_id is None and seat.booking_id is None
            assert has_owner if seat.status is SeatStatus.BOOKED else no_owner
