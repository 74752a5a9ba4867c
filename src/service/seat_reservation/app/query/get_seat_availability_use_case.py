"""
Seat availability query
"""

from src.platform.logging.loguru_io import Logger
from src.service.seat_reservation.app.dto import SeatAvailabilityResult
from src.service.seat_reservation.app.interface.i_ticket_service import ITicketService
from src.service.seat_reservation.domain.value_object import Venue


class GetSeatAvailabilityUseCase:
    def __init__(self, ticket_service: ITicketService, venue: Venue) -> None:
        self.ticket_service = ticket_service
        self.venue = venue

    @Logger.io
    def get_seat_availability(self) -> SeatAvailabilityResult:
        result = SeatAvailabilityResult(
            available_seats=self.ticket_service.number_of_seats_available(),
            total_seats=self.venue.number_of_seats,
        )
        Logger.base.info(
            f'📊 [AVAILABILITY] {result.available_seats}/{result.total_seats} seats available, '
            f'{result.unavailable_seats} held or reserved'
        )
        return result
