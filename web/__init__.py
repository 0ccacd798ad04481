from typing import Any

from fastapi import Request
from pydantic import BaseModel

from config import DEFAULT_HOLDER
from core.seats import SeatLockManager


class HolderBody(BaseModel):
    # Any JSON value is accepted; falsy ones mean no holder was given
    user: Any = None


def get_manager(request: Request) -> SeatLockManager:
    return request.app.state.seats


def holder_of(body: HolderBody | None) -> str:
    if body is None or not body.user:
        return DEFAULT_HOLDER
    return str(body.user)
