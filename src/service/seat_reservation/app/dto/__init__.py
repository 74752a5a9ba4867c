"""Seat Reservation Application DTOs"""

from src.service.seat_reservation.app.dto.seat_hold_dto import (
    HoldSeatsRequest,
    HoldSeatsResult,
    ReserveSeatsRequest,
    ReserveSeatsResult,
    SeatAvailabilityResult,
)

__all__ = [
    'HoldSeatsRequest',
    'HoldSeatsResult',
    'ReserveSeatsRequest',
    'ReserveSeatsResult',
    'SeatAvailabilityResult',
]
