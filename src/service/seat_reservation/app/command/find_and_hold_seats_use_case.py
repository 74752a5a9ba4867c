"""
Find And Hold Seats Use Case - first-fit block hold on the seat engine
"""

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.seat_reservation.app.dto import HoldSeatsRequest, HoldSeatsResult
from src.service.seat_reservation.app.interface.i_ticket_service import ITicketService


class FindAndHoldSeatsUseCase:
    """
    Hold a block of consecutive seats for a customer.

    Rejections (missing email, bad count, not enough consecutive seats) come
    back as a failed result; nothing is raised for them.
    """

    def __init__(self, ticket_service: ITicketService) -> None:
        self.ticket_service = ticket_service
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    def find_and_hold_seats(self, request: HoldSeatsRequest) -> HoldSeatsResult:
        with self.tracer.start_as_current_span(
            'use_case.find_and_hold_seats',
            attributes={'seat.quantity': request.seat_count},
        ):
            if not request.customer_email:
                return HoldSeatsResult.rejected('Customer email is required')
            if request.seat_count < 1:
                return HoldSeatsResult.rejected('At least one seat must be requested')

            hold_id = self.ticket_service.find_and_hold_seats(
                seat_count=request.seat_count, customer_email=request.customer_email
            )
            if hold_id is None:
                return HoldSeatsResult.rejected(
                    f'No block of {request.seat_count} consecutive seats is available'
                )

            return HoldSeatsResult.held(hold_id)
