"""Status route: GET /"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def root():
    return {"message": "Ticket Booking API is running."}
