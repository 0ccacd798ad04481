"""APScheduler integration for releasing expired seat locks on time.

Expiry is already enforced lazily by SeatLockManager; these jobs only make a
released seat show up without waiting for the next request to touch it.
"""

import logging
from collections.abc import Hashable
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger

from config import SWEEP_GRACE_MS, TIMEZONE
from core.exceptions import SeatError
from core.seats import SeatLockManager

log = logging.getLogger(__name__)

_TZ = ZoneInfo(TIMEZONE)

scheduler = BackgroundScheduler(timezone=_TZ)


def _job_id(seat_id: Hashable) -> str:
    return f"expire_{seat_id}"


def expire_seat(manager: SeatLockManager, seat_id: Hashable) -> None:
    """Reconcile one seat. Called by APScheduler at the lock deadline."""
    try:
        released = manager.reconcile(seat_id)
    except SeatError as e:
        log.warning("Expiry sweep for seat %s skipped: %s", seat_id, e)
        return
    except Exception:
        log.exception("Expiry sweep for seat %s error:", seat_id)
        return
    if released:
        log.info("Expiry sweep released seat %s.", seat_id)


def schedule_expiry(manager: SeatLockManager, seat_id: Hashable) -> str | None:
    """Register a one-shot sweep at the seat's lock deadline. Returns the job id."""
    if not scheduler.running:
        return None

    remaining = manager.expires_in(seat_id)
    if remaining is None:
        return None

    run_at = datetime.now(_TZ) + timedelta(seconds=remaining, milliseconds=SWEEP_GRACE_MS)
    job_apid = _job_id(seat_id)
    scheduler.add_job(
        expire_seat,
        trigger=DateTrigger(run_date=run_at, timezone=_TZ),
        args=[manager, seat_id],
        id=job_apid,
        name=f"expire seat {seat_id}",
        replace_existing=True,
    )
    log.debug("Scheduled expiry sweep for seat %s at %s", seat_id, run_at.isoformat())
    return job_apid


def cancel_expiry(seat_id: Hashable) -> None:
    job_apid = _job_id(seat_id)
    if scheduler.get_job(job_apid):
        scheduler.remove_job(job_apid)


def start(enabled: bool = True) -> None:
    """Start a fresh scheduler; a shut-down one cannot run jobs again."""
    global scheduler
    if not enabled:
        log.info("Expiry sweep disabled, relying on lazy expiry only.")
        return
    if not scheduler.running:
        scheduler = BackgroundScheduler(timezone=_TZ)
        scheduler.start()
    log.info("Scheduler started.")


def shutdown() -> None:
    if scheduler.running:
        scheduler.shutdown(wait=False)
        log.info("Scheduler shut down.")
