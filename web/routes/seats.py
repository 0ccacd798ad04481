"""Seat routes: /seats/*"""

from fastapi import APIRouter, Depends

from core import scheduler as sched
from core.seats import SeatLockManager
from web import HolderBody, get_manager, holder_of

router = APIRouter()


@router.get("/seats")
def seat_list(manager: SeatLockManager = Depends(get_manager)):
    return manager.list_seats()


@router.post("/seats/lock/{seat_id}")
def seat_lock(seat_id: str, body: HolderBody | None = None,
              manager: SeatLockManager = Depends(get_manager)):
    seat = manager.lock(seat_id, holder_of(body))
    sched.schedule_expiry(manager, seat_id)
    return {
        "message": f"Seat {seat_id} locked successfully. Confirm within {manager.lock_ttl:g} seconds.",
        "seat": seat,
    }


@router.post("/seats/confirm/{seat_id}")
def seat_confirm(seat_id: str, body: HolderBody | None = None,
                 manager: SeatLockManager = Depends(get_manager)):
    seat = manager.confirm(seat_id, holder_of(body))
    sched.cancel_expiry(seat_id)
    return {
        "message": f"Seat {seat_id} booked successfully!",
        "seat": seat,
    }
