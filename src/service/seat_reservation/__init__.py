"""
Seat Reservation

In-memory seat hold and reservation engine for a single venue.
Responsibilities:
- First-fit search for consecutive seats
- Time-limited holds with lazy expiry
- Committing holds into reservations
"""
