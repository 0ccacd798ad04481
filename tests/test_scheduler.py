"""Tests for the expiry sweep jobs."""

import pytest
from apscheduler.schedulers.background import BackgroundScheduler

from core import scheduler as sched
from core.seats import SeatStatus


@pytest.fixture
def running_scheduler(monkeypatch):
    scheduler = BackgroundScheduler()
    monkeypatch.setattr(sched, "scheduler", scheduler)
    scheduler.start(paused=True)
    yield scheduler
    scheduler.shutdown(wait=False)


class TestExpireSeat:
    def test_releases_expired_lock(self, manager, clock):
        manager.lock("1", "alice")
        clock.advance(61)
        sched.expire_seat(manager, "1")
        assert manager.get_seat("1").status is SeatStatus.AVAILABLE

    def test_leaves_live_lock(self, manager, clock):
        manager.lock("1", "alice")
        clock.advance(30)
        sched.expire_seat(manager, "1")
        assert manager.get_seat("1").locked_by == "alice"

    def test_leaves_booked_seat(self, manager, clock):
        manager.lock("1", "alice")
        manager.confirm("1", "alice")
        clock.advance(61)
        sched.expire_seat(manager, "1")
        assert manager.get_seat("1").status is SeatStatus.BOOKED

    def test_unknown_seat_is_logged_not_raised(self, manager):
        sched.expire_seat(manager, "99")


class TestScheduleExpiry:
    def test_not_running_schedules_nothing(self, manager, monkeypatch):
        monkeypatch.setattr(sched, "scheduler", BackgroundScheduler())
        manager.lock("1", "alice")
        assert sched.schedule_expiry(manager, "1") is None

    def test_unlocked_seat_schedules_nothing(self, manager, running_scheduler):
        assert sched.schedule_expiry(manager, "1") is None
        assert running_scheduler.get_jobs() == []

    def test_schedules_one_job_per_seat(self, manager, clock, running_scheduler):
        manager.lock("1", "alice")
        assert sched.schedule_expiry(manager, "1") == "expire_1"
        assert sched.schedule_expiry(manager, "1") == "expire_1"

        jobs = running_scheduler.get_jobs()
        assert [job.id for job in jobs] == ["expire_1"]
        assert jobs[0].args == (manager, "1")

    def test_cancel_expiry(self, manager, running_scheduler):
        manager.lock("2", "bob")
        sched.schedule_expiry(manager, "2")
        sched.cancel_expiry("2")
        sched.cancel_expiry("2")
        assert running_scheduler.get_job("expire_2") is None


class TestStartShutdown:
    def test_restart_gets_a_fresh_scheduler(self, manager, monkeypatch):
        monkeypatch.setattr(sched, "scheduler", sched.scheduler)

        sched.start()
        first = sched.scheduler
        sched.shutdown()
        assert not first.running

        sched.start()
        try:
            assert sched.scheduler is not first
            assert sched.scheduler.running
            manager.lock("1", "alice")
            assert sched.schedule_expiry(manager, "1") == "expire_1"
        finally:
            sched.shutdown()

    def test_disabled_start_leaves_scheduler_stopped(self, monkeypatch):
        monkeypatch.setattr(sched, "scheduler", BackgroundScheduler())
        sched.start(enabled=False)
        assert not sched.scheduler.running
