"""FastAPI application with APScheduler lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import LOCK_TTL_MS, SEAT_IDS, SWEEP_ENABLED
from core import scheduler as sched
from core.exceptions import (
    SeatConflictError,
    SeatError,
    SeatForbiddenError,
    SeatNotFoundError,
    SeatNotLockedError,
)
from core.seats import SeatLockManager
from web.routes import router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

log = logging.getLogger(__name__)

STATUS_CODES = {
    SeatNotFoundError: 404,
    SeatConflictError: 409,
    SeatNotLockedError: 400,
    SeatForbiddenError: 403,
}


async def seat_error_handler(request: Request, exc: SeatError) -> JSONResponse:
    return JSONResponse(status_code=STATUS_CODES.get(type(exc), 400), content={"message": exc.message})


def create_app(manager: SeatLockManager | None = None, sweep: bool = SWEEP_ENABLED) -> FastAPI:
    if manager is None:
        manager = SeatLockManager(SEAT_IDS, lock_ttl=LOCK_TTL_MS / 1000)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("Seats: %s. Lock expiration set to %g seconds.",
                 ", ".join(str(s) for s in manager.seat_ids), manager.lock_ttl)
        sched.start(enabled=sweep)
        yield
        sched.shutdown()

    app = FastAPI(title="Ticket Booking API", lifespan=lifespan)
    app.state.seats = manager
    app.add_exception_handler(SeatError, seat_error_handler)
    app.include_router(router)
    return app


app = create_app()
