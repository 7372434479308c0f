from datetime import datetime

import attrs
from uuid_utils import UUID, uuid7

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.seat_entity import Seat


def _non_empty(instance: object, attribute: attrs.Attribute, value: tuple) -> None:
    if not value:
        raise DomainError('Booking must hold at least one seat')


@attrs.define(frozen=True)
class Booking:
    id: UUID = attrs.field(validator=attrs.validators.instance_of(UUID))
    user_id: str = attrs.field(validator=attrs.validators.instance_of(str))
    seats: tuple[Seat, ...] = attrs.field(converter=tuple, validator=_non_empty)
    created_at: datetime = attrs.field(factory=datetime.now)

    @staticmethod
    def next_id() -> UUID:
        return uuid7()

    @classmethod
    @Logger.io
    def create(cls, *, booking_id: UUID, user_id: str, seats: tuple[Seat, ...]) -> 'Booking':
        return cls(id=booking_id, user_id=user_id, seats=seats, created_at=datetime.now())

    @property
    def seat_ids(self) -> tuple[int, ...]:
        return tuple(seat.id for seat in self.seats)

    @property
    def seat_labels(self) -> tuple[str, ...]:
        return tuple(seat.label for seat in self.seats)
