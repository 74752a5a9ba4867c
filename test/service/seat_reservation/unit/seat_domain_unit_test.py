"""
Unit tests for the seat reservation domain: Venue, Seat, SeatHold, SeatReservation
"""

import attrs
import pytest

from src.platform.exception.exceptions import DomainError, VenueConfigError
from src.service.seat_reservation.domain.entity import Seat
from src.service.seat_reservation.domain.enum import SeatStatus
from src.service.seat_reservation.domain.value_object import SeatHold, SeatReservation, Venue


MAX_HOLD_MS = 300


def _hold(*, hold_id: int = 7, created_at: float = 0.0) -> SeatHold:
    return SeatHold(
        id=hold_id,
        customer_email='A@Example.com',
        start_seat=10,
        seat_count=4,
        created_at=created_at,
    )


class TestVenue:
    @pytest.mark.unit
    def test_number_of_seats(self) -> None:
        assert Venue(rows=20, cols=25).number_of_seats == 500

    @pytest.mark.unit
    @pytest.mark.parametrize('rows,cols', [(0, 10), (10, 0), (-1, 5), (5, -3)])
    def test_rejects_non_positive_layout(self, rows: int, cols: int) -> None:
        with pytest.raises(VenueConfigError):
            Venue(rows=rows, cols=cols)

    @pytest.mark.unit
    def test_config_error_is_domain_error(self) -> None:
        with pytest.raises(DomainError) as exc_info:
            Venue(rows=0, cols=0)
        assert exc_info.value.status_code == 500

    @pytest.mark.unit
    def test_locate_is_row_major(self) -> None:
        venue = Venue(rows=3, cols=4)
        assert venue.locate(0) == (1, 1)
        assert venue.locate(3) == (1, 4)
        assert venue.locate(4) == (2, 1)
        assert venue.locate(11) == (3, 4)

    @pytest.mark.unit
    def test_locate_outside_venue(self) -> None:
        with pytest.raises(IndexError):
            Venue(rows=2, cols=2).locate(4)

    @pytest.mark.unit
    def test_is_immutable(self) -> None:
        venue = Venue(rows=2, cols=2)
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            venue.rows = 3  # type: ignore[misc]


class TestSeatTransitions:
    @pytest.mark.unit
    def test_new_seat_is_open(self) -> None:
        seat = Seat(seat_id=0)
        assert seat.status == SeatStatus.OPEN
        assert seat.hold_ref is None

    @pytest.mark.unit
    def test_hold_sets_ref(self) -> None:
        seat = Seat(seat_id=0)
        seat.hold(42)
        assert seat.status == SeatStatus.HELD
        assert seat.hold_ref == 42
        assert seat.is_held_by(42)
        assert not seat.is_held_by(43)

    @pytest.mark.unit
    def test_release_clears_ref(self) -> None:
        seat = Seat(seat_id=0)
        seat.hold(42)
        seat.release()
        assert seat.status == SeatStatus.OPEN
        assert seat.hold_ref is None
        assert not seat.is_held_by(42)

    @pytest.mark.unit
    def test_reserved_seat_is_not_held(self) -> None:
        seat = Seat(seat_id=0)
        seat.hold(42)
        seat.reserve()
        assert seat.status == SeatStatus.RESERVED
        assert not seat.is_held_by(42)


class TestSeatAvailability:
    @pytest.mark.unit
    def test_open_seat_is_available(self) -> None:
        seat = Seat(seat_id=0)
        assert seat.is_available(None, now=0, max_hold_duration_ms=MAX_HOLD_MS)

    @pytest.mark.unit
    def test_reserved_seat_is_never_available(self) -> None:
        seat = Seat(seat_id=0, status=SeatStatus.RESERVED)
        assert not seat.is_available(None, now=10_000, max_hold_duration_ms=MAX_HOLD_MS)

    @pytest.mark.unit
    def test_held_seat_with_live_hold(self) -> None:
        seat = Seat(seat_id=10)
        seat.hold(7)
        hold = _hold(created_at=0)
        assert not seat.is_available(hold, now=MAX_HOLD_MS - 1, max_hold_duration_ms=MAX_HOLD_MS)

    @pytest.mark.unit
    def test_held_seat_becomes_available_at_timeout(self) -> None:
        seat = Seat(seat_id=10)
        seat.hold(7)
        hold = _hold(created_at=0)
        assert seat.is_available(hold, now=MAX_HOLD_MS, max_hold_duration_ms=MAX_HOLD_MS)

    @pytest.mark.unit
    def test_held_seat_without_hold_record(self) -> None:
        seat = Seat(seat_id=10)
        seat.hold(7)
        assert seat.is_available(None, now=0, max_hold_duration_ms=MAX_HOLD_MS)


class TestSeatBlocks:
    @pytest.mark.unit
    def test_range(self) -> None:
        hold = _hold()
        assert hold.end_seat == 14
        assert list(hold.seat_indices) == [10, 11, 12, 13]

    @pytest.mark.unit
    def test_owner_match_ignores_case(self) -> None:
        hold = _hold()
        assert hold.belongs_to('a@example.com')
        assert hold.belongs_to('A@EXAMPLE.COM')
        assert not hold.belongs_to('b@example.com')

    @pytest.mark.unit
    def test_expiry_is_strictly_after_timeout(self) -> None:
        hold = _hold(created_at=100)
        assert hold.age(now=250) == 150
        assert not hold.is_expired(now=100 + MAX_HOLD_MS, max_hold_duration_ms=MAX_HOLD_MS)
        assert hold.is_expired(now=101 + MAX_HOLD_MS, max_hold_duration_ms=MAX_HOLD_MS)

    @pytest.mark.unit
    def test_reservation_carries_hold_block(self) -> None:
        hold = _hold(hold_id=0)
        reservation = SeatReservation.from_hold(hold, reserved_at=500)
        assert reservation.id == 0
        assert reservation.customer_email == hold.customer_email
        assert reservation.start_seat == 10
        assert reservation.seat_count == 4
        assert reservation.reserved_at == 500
        assert reservation.confirmation_code == '0'
