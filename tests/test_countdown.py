"""
特惠倒计时测试。
"""
import threading
import time
from datetime import datetime, timedelta

from catalog.domain.services import end_of_day, remaining_time
from catalog.domain.value_objects import CountdownParts
from catalog.infrastructure.services.countdown_timer import CountdownTimer


class FakeClock:
    """可手动拨动的时钟"""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class TestRemainingTime:
    """剩余时间计算"""

    def test_end_of_day(self):
        moment = datetime(2024, 6, 1, 8, 30, 15, 123456)

        assert end_of_day(moment) == datetime(2024, 6, 1, 23, 59, 59, 999000)

    def test_last_seconds_clamp_to_zero(self):
        now = datetime(2024, 6, 1, 23, 59, 58, 500000)
        deadline = end_of_day(now)

        assert remaining_time(deadline, now) == CountdownParts(0, 0, 1)
        assert remaining_time(deadline, now + timedelta(seconds=1.5)) == CountdownParts(0, 0, 0)
        assert remaining_time(deadline, now + timedelta(hours=3)) == CountdownParts(0, 0, 0)

    def test_decomposition(self):
        now = datetime(2024, 6, 1, 10, 0, 0)

        parts = remaining_time(end_of_day(now), now)

        assert (parts.hours, parts.minutes, parts.seconds) == (13, 59, 59)
        assert parts.display() == "13:59:59"

    def test_padded_display(self):
        parts = CountdownParts(5, 9, 0)

        assert parts.padded() == {"hours": "05", "minutes": "09", "seconds": "00"}
        assert parts.to_dict() == {"hours": 5, "minutes": 9, "seconds": 0, "display": "05:09:00"}
        assert not parts.is_expired
        assert CountdownParts(0, 0, 0).is_expired


class TestCountdownTimer:
    """倒计时定时器"""

    def test_deadline_is_fixed_at_start(self):
        clock = FakeClock(datetime(2024, 6, 1, 23, 59, 58, 500000))
        ticks = []
        timer = CountdownTimer(ticks.append, clock=clock, interval=3600)

        try:
            assert timer.start() == CountdownParts(0, 0, 1)
            assert timer.running

            clock.advance(seconds=1.5)
            assert timer.tick() == CountdownParts(0, 0, 0)

            # 跨过午夜后不会滚动到下一天
            clock.advance(seconds=10)
            assert timer.tick() == CountdownParts(0, 0, 0)
            assert timer.deadline == datetime(2024, 6, 1, 23, 59, 59, 999000)
        finally:
            timer.stop()

        assert not timer.running
        assert ticks == [CountdownParts(0, 0, 1), CountdownParts(0, 0, 0), CountdownParts(0, 0, 0)]

    def test_background_ticks_until_stopped(self):
        clock = FakeClock(datetime(2024, 6, 1, 12, 0, 0))
        ticked = threading.Event()
        ticks = []

        def on_tick(parts):
            ticks.append(parts)
            if len(ticks) >= 3:
                ticked.set()

        timer = CountdownTimer(on_tick, clock=clock, interval=0.01)
        timer.start()
        try:
            assert ticked.wait(timeout=5)
        finally:
            timer.stop()

        count = len(ticks)
        assert not timer.running
        time.sleep(0.05)
        assert len(ticks) == count
