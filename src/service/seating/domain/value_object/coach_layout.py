"""
Coach Layout Value Object

Fixed seat arrangement of one coach: `full_rows` rows of `seats_per_row` seats,
followed by an optional shorter last row of `last_row_seats` seats.
"""

from typing import Iterator

import attrs

from src.platform.config.core_setting import Settings, settings
from src.platform.exception.exceptions import DomainError


def _positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise DomainError(f'{attribute.name} must be positive, got {value}')


@attrs.define(frozen=True)
class CoachLayout:
    """Coach Layout (Value Object)"""

    full_rows: int = attrs.field(validator=[attrs.validators.instance_of(int), _positive])
    seats_per_row: int = attrs.field(validator=[attrs.validators.instance_of(int), _positive])
    last_row_seats: int = attrs.field(default=0, validator=attrs.validators.instance_of(int))

    def __attrs_post_init__(self) -> None:
        if not 0 <= self.last_row_seats <= self.seats_per_row:
            raise DomainError(
                f'last_row_seats must be within 0..{self.seats_per_row}, '
                f'got {self.last_row_seats}'
            )

    @classmethod
    def from_settings(cls, config: Settings = settings) -> 'CoachLayout':
        return cls(
            full_rows=config.COACH_FULL_ROWS,
            seats_per_row=config.COACH_SEATS_PER_ROW,
            last_row_seats=config.COACH_LAST_ROW_SEATS,
        )

    @property
    def total_rows(self) -> int:
        return self.full_rows + (1 if self.last_row_seats else 0)

    @property
    def total_seats(self) -> int:
        return self.full_rows * self.seats_per_row + self.last_row_seats

    @property
    def rows(self) -> range:
        return range(1, self.total_rows + 1)

    def row_capacity(self, row: int) -> int:
        """Number of seats in `row`, 0 for rows outside the coach"""
        if 1 <= row <= self.full_rows:
            return self.seats_per_row
        if row == self.full_rows + 1:
            return self.last_row_seats
        return 0

    def iter_positions(self) -> Iterator[tuple[int, int]]:
        """Yield every `(row, position)` front to back, left to right"""
        for row in self.rows:
            for position in range(1, self.row_capacity(row) + 1):
                yield row, position


DEFAULT_LAYOUT = CoachLayout(full_rows=11, seats_per_row=7, last_row_seats=3)
