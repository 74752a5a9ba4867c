"""Seat entity - one slot of the in-memory seat table."""

from typing import Optional

import attrs

from src.service.seat_reservation.domain.enum import SeatStatus
from src.service.seat_reservation.domain.value_object import SeatHold


@attrs.define
class Seat:
    seat_id: int
    status: SeatStatus = SeatStatus.OPEN
    hold_ref: Optional[int] = None  # id of the hold backing a HELD seat

    def hold(self, hold_id: int) -> None:
        self.status = SeatStatus.HELD
        self.hold_ref = hold_id

    def reserve(self) -> None:
        self.status = SeatStatus.RESERVED

    def release(self) -> None:
        # hold_ref must never outlive the HELD status
        self.status = SeatStatus.OPEN
        self.hold_ref = None

    def is_held_by(self, hold_id: int) -> bool:
        return self.status == SeatStatus.HELD and self.hold_ref == hold_id

    def is_available(
        self, hold: Optional[SeatHold], *, now: float, max_hold_duration_ms: int
    ) -> bool:
        """
        OPEN seats are available; HELD seats are available once their hold is
        gone or has reached the timeout. RESERVED seats never are.
        """
        if self.status == SeatStatus.OPEN:
            return True
        if self.status == SeatStatus.HELD:
            return hold is None or hold.age(now) >= max_hold_duration_ms
        return False
