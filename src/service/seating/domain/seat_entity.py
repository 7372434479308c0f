from typing import Optional

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import DomainError
from src.service.seating.domain.enum import SeatStatus


def _positive_int(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise DomainError(f'Seat {attribute.name} must be a positive integer, got {value}')


@attrs.define(frozen=True)
class Seat:
    """
    One bookable unit of the coach.

    Owner fields (`user_id`, `booking_id`) are set if and only if the seat is booked.
    """

    id: int = attrs.field(validator=[attrs.validators.instance_of(int), _positive_int])
    row: int = attrs.field(validator=[attrs.validators.instance_of(int), _positive_int])
    position: int = attrs.field(validator=[attrs.validators.instance_of(int), _positive_int])
    status: SeatStatus = attrs.field(default=SeatStatus.AVAILABLE, converter=SeatStatus)
    user_id: Optional[str] = None
    booking_id: Optional[UUID] = None

    def __attrs_post_init__(self) -> None:
        has_owner = self.user_id is not None and self.booking_id is not None
        has_any_owner_field = self.user_id is not None or self.booking_id is not None
        if self.status is SeatStatus.BOOKED and not has_owner:
            raise DomainError(f'Booked seat {self.id} requires both user_id and booking_id')
        if self.status is not SeatStatus.BOOKED and has_any_owner_field:
            raise DomainError(f'Seat {self.id} is {self.status} and cannot carry an owner')

    @property
    def label(self) -> str:
        """Display form `row-position`, e.g. `3-5`"""
        return f'{self.row}-{self.position}'

    @property
    def is_available(self) -> bool:
        return self.status is SeatStatus.AVAILABLE

    @property
    def sort_key(self) -> tuple[int, int]:
        return self.row, self.position
