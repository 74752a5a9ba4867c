"""
Reserve Seats Use Case - commit a live hold into a permanent reservation
"""

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.seat_reservation.app.dto import ReserveSeatsRequest, ReserveSeatsResult
from src.service.seat_reservation.app.interface.i_ticket_service import ITicketService


class ReserveSeatsUseCase:
    """
    Reserve Seats Use Case

    Flow:
    1. Validate request
    2. Ask the ticket service to commit the hold (it also purges expired holds)
    3. Return confirmation code or a rejection
    """

    def __init__(self, ticket_service: ITicketService) -> None:
        self.ticket_service = ticket_service
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    def reserve_seats(self, request: ReserveSeatsRequest) -> ReserveSeatsResult:
        with self.tracer.start_as_current_span(
            'use_case.reserve_seats',
            attributes={'hold.id': request.hold_id},
        ):
            if not request.customer_email:
                return ReserveSeatsResult.rejected('Customer email is required')

            confirmation_code = self.ticket_service.reserve_seats(
                hold_id=request.hold_id, customer_email=request.customer_email
            )
            if confirmation_code is None:
                # Unknown, expired and foreign holds look the same to the caller
                return ReserveSeatsResult.rejected(
                    f'Hold {request.hold_id} is not valid for this customer'
                )

            Logger.base.info(
                f'✅ [RESERVE] Hold {request.hold_id} confirmed as {confirmation_code}'
            )
            return ReserveSeatsResult.reserved(confirmation_code)
