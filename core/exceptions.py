"""Custom exceptions for the seat lock service."""


class SeatError(Exception):
    """Raised when a seat operation is rejected."""

    def __init__(self, seat_id, message: str):
        super().__init__(message)
        self.seat_id = seat_id
        self.message = message


class SeatNotFoundError(SeatError):
    """The seat id is not part of the configured seat set."""

    def __init__(self, seat_id):
        super().__init__(seat_id, "Seat not found.")


class SeatConflictError(SeatError):
    """The seat is already locked or booked."""

    def __init__(self, seat_id, message: str, holder: str | None = None):
        super().__init__(seat_id, message)
        self.holder = holder


class SeatNotLockedError(SeatError):
    """Confirm attempted without a valid lock."""


class SeatForbiddenError(SeatError):
    """Confirm attempted by someone other than the lock holder."""
