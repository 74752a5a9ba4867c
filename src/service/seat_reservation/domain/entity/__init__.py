"""Seat Reservation Entities"""

from src.service.seat_reservation.domain.entity.seat import Seat

__all__ = ['Seat']
