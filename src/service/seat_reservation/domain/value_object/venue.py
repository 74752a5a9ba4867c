"""Venue value object."""

import attrs

from src.platform.exception.exceptions import VenueConfigError


def _positive(instance: 'Venue', attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise VenueConfigError(
            f'Venue {attribute.name} must be positive, got {value} '
            f'(rows={instance.rows}, cols={instance.cols})'
        )


@attrs.define(frozen=True)
class Venue:
    """
    Venue layout (Value Object).

    Seats are numbered row-major from 0 to rows * cols - 1. The seat table is
    flat, so a block of seats may run from the end of one row into the next.
    """

    rows: int = attrs.field(validator=_positive)
    cols: int = attrs.field(validator=_positive)

    @property
    def number_of_seats(self) -> int:
        return self.rows * self.cols

    def locate(self, seat_index: int) -> tuple[int, int]:
        """Return the 1-indexed (row, seat_num) of a flat seat index."""
        if not 0 <= seat_index < self.number_of_seats:
            raise IndexError(f'seat index {seat_index} outside venue of {self.number_of_seats}')
        row, col = divmod(seat_index, self.cols)
        return row + 1, col + 1
