import attrs
import pytest

from src.platform.exception.exceptions import DomainError
from src.service.seating.domain.enum import SeatStatus
from src.service.seating.domain.inventory import Inventory, generate_inventory
from src.service.seating.domain.seat_entity import Seat
from src.service.seating.domain.value_object import DEFAULT_LAYOUT, CoachLayout
from test.service.seating.fixtures import book, seat_ids_at


class TestGenerateInventory:
    @pytest.mark.unit
    def test_default_coach_has_eighty_available_seats(self):
        inventory = generate_inventory()

        assert len(inventory) == 80
        assert inventory.count_available() == 80
        assert all(seat.user_id is None and seat.booking_id is None for seat in inventory)

    @pytest.mark.unit
    def test_ids_are_contiguous_in_layout_order(self, inventory: Inventory):
        assert [seat.id for seat in inventory] == list(range(1, 81))
        assert inventory.get(1).label == '1-1'
        assert inventory.get(7).label == '1-7'
        assert inventory.get(8).label == '2-1'
        assert inventory.get(78).label == '12-1'
        assert inventory.get(80).label == '12-3'

    @pytest.mark.unit
    def test_row_and_position_pairs_are_unique(self, inventory: Inventory):
        pairs = {(seat.row, seat.position) for seat in inventory}

        assert len(pairs) == 80
        assert max(seat.row for seat in inventory) == 12

    @pytest.mark.unit
    def test_generation_is_deterministic(self):
        assert generate_inventory(DEFAULT_LAYOUT) == generate_inventory(DEFAULT_LAYOUT)

    @pytest.mark.unit
    def test_custom_layout(self):
        inventory = generate_inventory(CoachLayout(full_rows=2, seats_per_row=4))

        assert len(inventory) == 8
        assert [len(row) for row in inventory.by_row()] == [4, 4]


class TestInventoryInvariants:
    @pytest.mark.unit
    def test_rejects_missing_seat(self, inventory: Inventory):
        with pytest.raises(DomainError):
            Inventory(layout=DEFAULT_LAYOUT, seats=inventory.seats[:-1])

    @pytest.mark.unit
    def test_rejects_seat_outside_layout(self, inventory: Inventory):
        seats = list(inventory.seats)
        seats[79] = Seat(id=80, row=12, position=4)

        with pytest.raises(DomainError):
            Inventory(layout=DEFAULT_LAYOUT, seats=seats)

    @pytest.mark.unit
    def test_rejects_shuffled_ids(self, inventory: Inventory):
        seats = list(inventory.seats)
        seats[0], seats[1] = attrs.evolve(seats[0], id=2), attrs.evolve(seats[1], id=1)

        with pytest.raises(DomainError):
            Inventory(layout=DEFAULT_LAYOUT, seats=seats)

    @pytest.mark.unit
    def test_is_frozen(self, inventory: Inventory):
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            inventory.seats = ()  # type: ignore[misc]


class TestInventoryQueries:
    @pytest.mark.unit
    def test_get_unknown_seat_returns_none(self, inventory: Inventory):
        assert inventory.get(0) is None
        assert inventory.get(81) is None

    @pytest.mark.unit
    def test_by_row_groups_front_to_back(self, inventory: Inventory):
        rows = inventory.by_row()

        assert len(rows) == 12
        assert [len(row) for row in rows] == [7] * 11 + [3]
        assert all(seat.row == index for index, row in enumerate(rows, 1) for seat in row)

    @pytest.mark.unit
    def test_availability_reflects_bookings(self, inventory: Inventory):
        booked_ids = seat_ids_at(inventory, '1-1', '6-4')
        inventory = book(inventory, booked_ids)

        assert inventory.count_available() == 78
        assert not inventory.is_seat_available(booked_ids[0])
        assert inventory.is_seat_available(2)
        assert not inventory.is_seat_available(999)
        assert [s.label for s in inventory.seats_with_status(SeatStatus.BOOKED)] == ['1-1', '6-4']
