#!/usr/bin/env python3
"""
Demo Seed Script
Pre-book a handful of random seats so the seat map does not start empty

Features:
1. Book `--seats` random seats for a demo user, at most MAX_PARTY_SIZE per booking
2. Print the resulting seat map row by row
"""

import argparse
import random

from src.platform.config.di import Container, container
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.booking_entity import Booking
from src.service.seating.domain.user_entity import User


DEMO_USER = User(id='demo-user', username='demo', email='demo@coach.local')
STATUS_MARKS = {'available': '.', 'selected': 'S', 'booked': 'B'}


def seed_demo_bookings(
    di: Container, *, seat_count: int = 15, seed: int | None = None
) -> list[Booking]:
    # Leftover selections would otherwise be folded into the first demo booking
    di.clear_selection_use_case().execute()
    seat_map =di.get_seat_map_use_case().execute()
    free_ids = [seat.id for row in seat_map.rows for seat in row if seat.is_available]
    picked = random.Random(seed).sample(free_ids, k=min(seat_count, len(free_ids)))

    chunk_size = di.config_service().MAX_PARTY_SIZE
    bookings = []
    for start in range(0, len(picked), chunk_size):
        for seat_id in picked[start : start + chunk_size]:
            di.toggle_seat_selection_use_case().execute(seat_id=seat_id)
        result = di.confirm_booking_use_case().execute(user=DEMO_USER)
        bookings.append(result.booking)

    Logger.base.info(f'🌱 Seeded {len(picked)} booked seats in {len(bookings)} bookings')
    return bookings


def render_seat_map(di: Container) -> str:
    seat_map = di.get_seat_map_use_case().execute()
    lines = [
        f'{index:>2} ' + ' '.join(STATUS_MARKS[seat.status] for seat in row)
        for index, row in enumerate(seat_map.rows, start=1)
    ]
    lines.append(f'available: {seat_map.available_count}/{seat_map.total_seats}')
    return '\n'.join(lines)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f'must be 0 or more, got {number}')
    return number


def main() -> None:
    parser = argparse.ArgumentParser(description='Pre-book random demo seats')
    parser.add_argument('--seats', type=_non_negative_int, default=15)
    parser.add_argument('--seed', type=int, default=None)
    args = parser.parse_args()

    seed_demo_bookings(container, seat_count=args.seats, seed=args.seed)
    print(render_seat_map(container))


if __name__ == '__main__':
    main()
