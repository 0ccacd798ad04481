import pytest
from fastapi.testclient import TestClient

from core.seats import SeatLockManager
from web.app import create_app

SEAT_IDS = ["1", "2", "3", "4", "5"]
LOCK_TTL = 60.0


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manager(clock):
    return SeatLockManager(SEAT_IDS, lock_ttl=LOCK_TTL, clock=clock)


@pytest.fixture
def client(manager):
    # No context manager: the lifespan (and its scheduler) is not started
    return TestClient(create_app(manager, sweep=False))
