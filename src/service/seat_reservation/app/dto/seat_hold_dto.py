"""Seat hold / reservation DTOs."""

from typing import Optional

import attrs


@attrs.define
class HoldSeatsRequest:
    """Request to hold a block of consecutive seats"""

    seat_count: int
    customer_email: Optional[str]


@attrs.define
class HoldSeatsResult:
    success: bool
    hold_id: Optional[int] = None
    error_message: Optional[str] = None

    @classmethod
    def held(cls, hold_id: int) -> 'HoldSeatsResult':
        return cls(success=True, hold_id=hold_id)

    @classmethod
    def rejected(cls, error_message: str) -> 'HoldSeatsResult':
        return cls(success=False, error_message=error_message)


@attrs.define
class ReserveSeatsRequest:
    """Request to commit a hold into a reservation"""

    hold_id: int
    customer_email: Optional[str]


@attrs.define
class ReserveSeatsResult:
    success: bool
    confirmation_code: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def reserved(cls, confirmation_code: str) -> 'ReserveSeatsResult':
        return cls(success=True, confirmation_code=confirmation_code)

    @classmethod
    def rejected(cls, error_message: str) -> 'ReserveSeatsResult':
        return cls(success=False, error_message=error_message)


@attrs.define
class SeatAvailabilityResult:
    available_seats: int
    total_seats: int

    @property
    def unavailable_seats(self) -> int:
        return self.total_seats - self.available_seats
