from fastapi import APIRouter

from .status import router as status_router
from .seats import router as seats_router

router = APIRouter()
router.include_router(status_router)
router.include_router(seats_router)
