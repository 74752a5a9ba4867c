"""
Ticket Service Interface

Call surface of the seat allocation engine: availability count, hold, reserve.
Rejected requests return None; they are expected outcomes, not errors.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ITicketService(ABC):
    @abstractmethod
    def number_of_seats_available(self) -> int:
        """
        Count seats that are neither reserved nor held by a live hold.

        Returns:
            Non-negative number of available seats
        """
        pass

    @abstractmethod
    def find_and_hold_seats(
        self, *, seat_count: int, customer_email: Optional[str]
    ) -> Optional[int]:
        """
        Hold the lowest-indexed block of seat_count consecutive available seats.

        Args:
            seat_count: Number of consecutive seats to hold (>= 1)
            customer_email: Owner of the hold (required, non-empty)

        Returns:
            Hold id, or None if the input is invalid or no block fits
        """
        pass

    @abstractmethod
    def reserve_seats(self, *, hold_id: int, customer_email: Optional[str]) -> Optional[str]:
        """
        Commit a live hold into a reservation.

        Args:
            hold_id: Id returned by find_and_hold_seats
            customer_email: Must match the hold owner, case-insensitively

        Returns:
            Confirmation code (the hold id as a decimal string), or None when the
            hold is unknown, expired or owned by someone else
        """
        pass
