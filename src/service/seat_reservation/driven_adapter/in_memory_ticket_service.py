"""
In-Memory Ticket Service

Seat allocation engine: owns the seat table, the hold map, the reservation map
and the id sequence. One lock serializes every read and write of that state, so
a block of seats is always claimed, reserved or released as a unit.

Expiry is lazy. A HELD seat whose hold has timed out simply counts as available
again; the hold record itself is only purged when reserve_seats is called on it.
Holds that are never revisited stay in the hold map for the lifetime of the
engine (see pending_hold_count).
"""

import itertools
import threading
import time
from typing import Callable, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seat_reservation.app.interface.i_ticket_service import ITicketService
from src.service.seat_reservation.domain.entity import Seat
from src.service.seat_reservation.domain.value_object import SeatHold, SeatReservation, Venue
from src.service.seat_reservation.driven_adapter.seat_reservation_helper.seat_finder import (
    SeatFinder,
)


def monotonic_ms() -> float:
    return time.monotonic() * 1000


class InMemoryTicketService(ITicketService):
    def __init__(
        self,
        *,
        venue: Venue,
        max_hold_duration_ms: int,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        if max_hold_duration_ms <= 0:
            raise DomainError(
                f'Hold duration must be positive, got {max_hold_duration_ms} ms', 500
            )

        self._venue = venue
        self._max_hold_duration_ms = max_hold_duration_ms
        self._clock = clock
        self._lock = threading.Lock()

        self._seats: list[Seat] = [Seat(seat_id=i) for i in range(venue.number_of_seats)]
        self._holds: dict[int, SeatHold] = {}
        self._reservations: dict[int, SeatReservation] = {}
        self._id_sequence = itertools.count()

        Logger.base.info(
            f'[ENGINE] Initialized {venue.number_of_seats} seats '
            f'({venue.rows}x{venue.cols}), hold timeout {max_hold_duration_ms} ms'
        )

    @property
    def venue(self) -> Venue:
        return self._venue

    @property
    def max_hold_duration_ms(self) -> int:
        return self._max_hold_duration_ms

    # ------------------------------------------------------------------
    # Call surface
    # ------------------------------------------------------------------
    def number_of_seats_available(self) -> int:
        with self._lock:
            return self._count_available(self._clock())

    def find_and_hold_seats(
        self, *, seat_count: int, customer_email: Optional[str]
    ) -> Optional[int]:
        if not customer_email:
            Logger.base.debug('[HOLD] Rejected: customer email is required')
            return None
        if seat_count < 1:
            Logger.base.debug(f'[HOLD] Rejected: invalid seat count {seat_count}')
            return None

        with self._lock:
            now = self._clock()
            available = self._count_available(now)
            if seat_count > available:
                Logger.base.info(
                    f'[HOLD] Rejected: requested {seat_count} seats, {available} available'
                )
                return None

            start = SeatFinder.find_consecutive_seats(
                self._seats,
                quantity=seat_count,
                is_available=lambda seat: self._is_available(seat, now),
            )
            if start is None:
                Logger.base.info(
                    f'[HOLD] Rejected: no {seat_count} consecutive seats '
                    f'({available} available but fragmented)'
                )
                return None

            hold = SeatHold(
                id=next(self._id_sequence),
                customer_email=customer_email,
                start_seat=start,
                seat_count=seat_count,
                created_at=now,
            )
            self._holds[hold.id] = hold
            for index in hold.seat_indices:
                self._seats[index].hold(hold.id)

        first_row, first_seat = self._venue.locate(hold.start_seat)
        last_row, last_seat = self._venue.locate(hold.end_seat - 1)
        Logger.base.info(
            f'[HOLD] Hold {hold.id} created for seats [{hold.start_seat}, {hold.end_seat}) '
            f'(row {first_row} seat {first_seat} to row {last_row} seat {last_seat})'
        )
        return hold.id

    def reserve_seats(self, *, hold_id: int, customer_email: Optional[str]) -> Optional[str]:
        if not customer_email:
            Logger.base.debug('[RESERVE] Rejected: customer email is required')
            return None

        with self._lock:
            hold = self._holds.get(hold_id)
            if hold is None:
                Logger.base.info(f'[RESERVE] Rejected: hold {hold_id} not found')
                return None

            now = self._clock()
            if hold.is_expired(now=now, max_hold_duration_ms=self._max_hold_duration_ms):
                self._purge_hold(hold)
                Logger.base.info(f'[RESERVE] Rejected: hold {hold_id} expired, seats released')
                return None

            if not hold.belongs_to(customer_email):
                Logger.base.warning(
                    f'[RESERVE] Rejected: hold {hold_id} belongs to another customer'
                )
                return None

            # At exactly the timeout a newer hold may already own part of the block
            if not self._owns_block(hold):
                self._purge_hold(hold)
                Logger.base.info(f'[RESERVE] Rejected: hold {hold_id} lost seats to a newer hold')
                return None

            for index in hold.seat_indices:
                self._seats[index].reserve()
            reservation = SeatReservation.from_hold(hold, reserved_at=now)
            self._reservations[reservation.id] = reservation
            del self._holds[hold.id]

        Logger.base.info(
            f'[RESERVE] Reservation {reservation.confirmation_code} committed for seats '
            f'[{reservation.start_seat}, {reservation.end_seat})'
        )
        return reservation.confirmation_code

    # ------------------------------------------------------------------
    # Diagnostics (read-only, no expiry handling)
    # ------------------------------------------------------------------
    def get_hold_by_id(self, hold_id: int) -> Optional[SeatHold]:
        with self._lock:
            return self._holds.get(hold_id)

    def get_reservation_by_id(self, reservation_id: int) -> Optional[SeatReservation]:
        with self._lock:
            return self._reservations.get(reservation_id)

    def pending_hold_count(self) -> int:
        """Holds still on record, including expired ones nobody has revisited."""
        with self._lock:
            return len(self._holds)

    def get_seat(self, seat_index: int) -> Seat:
        """Snapshot of one seat; mutating it does not touch the seat table."""
        with self._lock:
            return attrs.evolve(self._seats[seat_index])

    # ------------------------------------------------------------------
    # Internals - callers must hold self._lock
    # ------------------------------------------------------------------
    def _is_available(self, seat: Seat, now: float) -> bool:
        hold = self._holds.get(seat.hold_ref) if seat.hold_ref is not None else None
        return seat.is_available(hold, now=now, max_hold_duration_ms=self._max_hold_duration_ms)

    def _count_available(self, now: float) -> int:
        return sum(1 for seat in self._seats if self._is_available(seat, now))

    def _owns_block(self, hold: SeatHold) -> bool:
        return all(self._seats[index].is_held_by(hold.id) for index in hold.seat_indices)

    def _release_block(self, hold: SeatHold) -> None:
        # Seats already re-claimed by a newer hold are left alone
        for index in hold.seat_indices:
            seat = self._seats[index]
            if seat.is_held_by(hold.id):
                seat.release()

    def _purge_hold(self, hold: SeatHold) -> None:
        self._release_block(hold)
        del self._holds[hold.id]
