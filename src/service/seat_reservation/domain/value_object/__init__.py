"""Seat Reservation Value Objects"""

from src.service.seat_reservation.domain.value_object.seat_block import (
    SeatBlock,
    SeatHold,
    SeatReservation,
)
from src.service.seat_reservation.domain.value_object.venue import Venue

__all__ = ['SeatBlock', 'SeatHold', 'SeatReservation', 'Venue']
