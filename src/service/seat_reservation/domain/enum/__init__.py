"""Seat Reservation Enums"""

from src.service.seat_reservation.domain.enum.seat_status import SeatStatus

__all__ = ['SeatStatus']
