"""
Coach State

Everything one booking session works on: the authoritative Inventory, the
BookingLedger, and the pending selection. The pending selection is the list of
seat ids the session picked but has not confirmed; the matching seats are
`selected` in the Inventory.
"""

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.booking_ledger import BookingLedger
from src.service.seating.domain.inventory import Inventory, generate_inventory
from src.service.seating.domain.value_object import CoachLayout


@attrs.define(frozen=True)
class CoachState:
    inventory: Inventory
    ledger: BookingLedger = attrs.field(factory=BookingLedger)
    pending_selection: tuple[int, ...] = attrs.field(factory=tuple, converter=tuple)
    version: int = 0

    @classmethod
    @Logger.io
    def initial(cls, *, layout: CoachLayout) -> 'CoachState':
        return cls(inventory=generate_inventory(layout))

    def evolve(self, **changes: object) -> 'CoachState':
        """Next snapshot, one version ahead"""
        return attrs.evolve(self, version=self.version + 1, **changes)  # type: ignore[arg-type]
