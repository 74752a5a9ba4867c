"""
Seat block value objects.

A block is a contiguous range of seat indices [start_seat, start_seat + seat_count)
owned by one customer. Holds expire, reservations do not.
"""

import attrs


@attrs.define(frozen=True)
class SeatBlock:
    id: int
    customer_email: str
    start_seat: int
    seat_count: int

    @property
    def end_seat(self) -> int:
        """Exclusive end index"""
        return self.start_seat + self.seat_count

    @property
    def seat_indices(self) -> range:
        return range(self.start_seat, self.end_seat)

    def belongs_to(self, customer_email: str) -> bool:
        return self.customer_email.casefold() == customer_email.casefold()


@attrs.define(frozen=True)
class SeatHold(SeatBlock):
    """Pending claim on a block; created_at is a monotonic timestamp in ms."""

    created_at: float

    def age(self, now: float) -> float:
        return now - self.created_at

    def is_expired(self, *, now: float, max_hold_duration_ms: int) -> bool:
        return self.age(now) > max_hold_duration_ms


@attrs.define(frozen=True)
class SeatReservation(SeatBlock):
    """Permanent claim on a block, keyed by the id of the hold it came from."""

    reserved_at: float

    @classmethod
    def from_hold(cls, hold: SeatHold, *, reserved_at: float) -> 'SeatReservation':
        return cls(
            id=hold.id,
            customer_email=hold.customer_email,
            start_seat=hold.start_seat,
            seat_count=hold.seat_count,
            reserved_at=reserved_at,
        )

    @property
    def confirmation_code(self) -> str:
        return str(self.id)
