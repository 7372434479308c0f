"""Helpers for building seating inventories in tests."""

from collections.abc import Iterable

from uuid_utils import uuid7

from src.service.seating.domain.enum import SeatStatus
from src.service.seating.domain.inventory import Inventory
from src.service.seating.domain.services.seat_status_mutator import SeatStatusMutator


def seat_ids_at(inventory: Inventory, *labels: str) -> list[int]:
    """Seat ids for `row-position` labels, e.g. seat_ids_at(inv, '3-1', '4-7')"""
    by_label = {seat.label: seat.id for seat in inventory}
    return [by_label[label] for label in labels]


def book(inventory: Inventory, seat_ids: Iterable[int], user_id: str = 'other') -> Inventory:
    return SeatStatusMutator.apply_status(
        inventory=inventory,
        seat_ids=seat_ids,
        status=SeatStatus.BOOKED,
        user_id=user_id,
        booking_id=uuid7(),
    )


def book_all_except(inventory: Inventory, keep_ids: Iterable[int]) -> Inventory:
    keep = set(keep_ids)
    return book(inventory, [seat.id for seat in inventory if seat.id not in keep])
