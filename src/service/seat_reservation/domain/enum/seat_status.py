"""Seat Status Enum"""

from enum import StrEnum


class SeatStatus(StrEnum):
    OPEN = 'open'
    HELD = 'held'
    RESERVED = 'reserved'
