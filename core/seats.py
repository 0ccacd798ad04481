"""Seat table with time-bounded locks: list, lock, confirm, expire."""

import logging
import threading
import time
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, replace
from enum import Enum

from config import DEFAULT_HOLDER
from core.exceptions import (
    SeatConflictError,
    SeatForbiddenError,
    SeatNotFoundError,
    SeatNotLockedError,
)

log = logging.getLogger(__name__)


class SeatStatus(str, Enum):
    AVAILABLE = "available"
    LOCKED = "locked"
    BOOKED = "booked"


@dataclass
class Seat:
    id: Hashable
    status: SeatStatus = SeatStatus.AVAILABLE
    lock_timestamp: float | None = None
    locked_by: str | None = None

    def as_dict(self) -> dict:
        return {"id": self.id, "status": self.status.value}


class SeatLockManager:
    """Owns the seat table and serializes every operation on it.

    Expiry is lazy: each operation reconciles the seats it touches before
    looking at their status, so a stale lock is never observed as active.
    ``lock_ttl`` is in seconds and compared against ``clock()`` readings.
    """

    def __init__(self, seat_ids: Iterable[Hashable], lock_ttl: float,
                 clock: Callable[[], float] = time.monotonic):
        self._seats = {seat_id: Seat(seat_id) for seat_id in seat_ids}
        self.lock_ttl = lock_ttl
        self._clock = clock
        self._mutex = threading.RLock()

    @property
    def seat_ids(self) -> tuple:
        return tuple(self._seats)

    def _get(self, seat_id: Hashable) -> Seat:
        seat = self._seats.get(seat_id)
        if seat is None:
            raise SeatNotFoundError(seat_id)
        return seat

    def _reconcile(self, seat: Seat, now: float) -> bool:
        if seat.status is not SeatStatus.LOCKED:
            return False
        if now <= seat.lock_timestamp + self.lock_ttl:
            return False
        log.info("Lock for seat %s held by %s expired. Resetting status.", seat.id, seat.locked_by)
        seat.status = SeatStatus.AVAILABLE
        seat.lock_timestamp = None
        seat.locked_by = None
        return True

    def reconcile(self, seat_id: Hashable) -> bool:
        """Release the seat if its lock has expired. Returns True if it was released."""
        with self._mutex:
            return self._reconcile(self._get(seat_id), self._clock())

    def list_seats(self) -> list[dict]:
        with self._mutex:
            now = self._clock()
            for seat in self._seats.values():
                self._reconcile(seat, now)
            return [seat.as_dict() for seat in self._seats.values()]

    def get_seat(self, seat_id: Hashable) -> Seat:
        """Return a reconciled copy of one seat."""
        with self._mutex:
            seat = self._get(seat_id)
            self._reconcile(seat, self._clock())
            return replace(seat)

    def expires_in(self, seat_id: Hashable) -> float | None:
        """Seconds left on the current lock, or None if the seat is not locked."""
        with self._mutex:
            seat = self._get(seat_id)
            now = self._clock()
            self._reconcile(seat, now)
            if seat.status is not SeatStatus.LOCKED:
                return None
            return seat.lock_timestamp + self.lock_ttl - now

    def lock(self, seat_id: Hashable, holder: str = DEFAULT_HOLDER) -> dict:
        with self._mutex:
            seat = self._get(seat_id)
            now = self._clock()
            self._reconcile(seat, now)

            if seat.status is SeatStatus.LOCKED:
                log.info("Lock on seat %s by %s rejected: held by %s.", seat_id, holder, seat.locked_by)
                raise SeatConflictError(
                    seat_id, f"Seat {seat_id} is already locked by user {seat.locked_by}.",
                    holder=seat.locked_by,
                )
            if seat.status is SeatStatus.BOOKED:
                log.info("Lock on seat %s by %s rejected: already booked.", seat_id, holder)
                raise SeatConflictError(seat_id, f"Seat {seat_id} is already booked.")

            seat.status = SeatStatus.LOCKED
            seat.lock_timestamp = now
            seat.locked_by = holder
            log.info("Seat %s locked by %s for %.0fs.", seat_id, holder, self.lock_ttl)
            return seat.as_dict()

    def confirm(self, seat_id: Hashable, holder: str = DEFAULT_HOLDER) -> dict:
        with self._mutex:
            seat = self._get(seat_id)
            self._reconcile(seat, self._clock())

            if seat.status is SeatStatus.LOCKED and seat.locked_by == holder:
                seat.status = SeatStatus.BOOKED
                seat.lock_timestamp = None
                log.info("Seat %s booked by %s.", seat_id, holder)
                return seat.as_dict()

            if seat.status is SeatStatus.AVAILABLE:
                log.info("Confirm on seat %s by %s rejected: not locked.", seat_id, holder)
                raise SeatNotLockedError(seat_id, "Seat is not locked and cannot be booked. Lock it first.")
            if seat.status is SeatStatus.BOOKED:
                log.info("Confirm on seat %s by %s rejected: already booked.", seat_id, holder)
                raise SeatConflictError(seat_id, f"Seat {seat_id} is already booked.")

            log.info("Confirm on seat %s by %s rejected: locked by %s.", seat_id, holder, seat.locked_by)
            raise SeatForbiddenError(
                seat_id, f"Seat {seat_id} is locked by another user and cannot be confirmed."
            )
