"""
Seat Finder

First-fit search for N consecutive available seats over the flat seat table.
"""

from typing import Callable, Optional, Sequence

from src.service.seat_reservation.domain.entity import Seat


class SeatFinder:
    """
    Find the lowest-indexed run of consecutive available seats.

    Responsibility: scan only. The caller decides availability and owns the
    lock around scan-and-mark.
    """

    @staticmethod
    def find_consecutive_seats(
        seats: Sequence[Seat],
        *,
        quantity: int,
        is_available: Callable[[Seat], bool],
    ) -> Optional[int]:
        """
        Scan left to right and return the start index of the first window of
        `quantity` available seats.

        When a probe from `start` hits an unavailable seat, scanning resumes
        right after that seat; every window that begins before it would contain
        it too.

        Returns:
            Start index, or None if no window fits (including fragmentation)

        Examples (o = available, x = taken):
            oooxx ooooo, quantity=3 → 0
            ooxxo ooooo, quantity=3 → 4
            oxoxo xoxox, quantity=2 → None
        """
        if quantity < 1:
            return None

        last_start = len(seats) - quantity
        start = 0
        while start <= last_start:
            if not is_available(seats[start]):
                start += 1
                continue

            blocked_at: Optional[int] = None
            for index in range(start + 1, start + quantity):
                if not is_available(seats[index]):
                    blocked_at = index
                    break

            if blocked_at is None:
                return start
            start = blocked_at + 1

        return None
