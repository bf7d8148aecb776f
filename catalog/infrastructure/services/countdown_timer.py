"""
特惠倒计时定时器。
启动时固定截止时间为当天结束时刻，之后每秒在后台线程重新计算剩余时间。
"""
import threading
from datetime import datetime
from typing import Callable, Optional

from django.utils import timezone
from loguru import logger

from catalog.domain.services import end_of_day, remaining_time
from catalog.domain.value_objects import CountdownParts


class CountdownTimer:
    """
    倒计时定时器。
    截止时间过后保持为0，不会滚动到下一天，由持有者调用stop()取消。
    """

    def __init__(
        self,
        on_tick: Callable[[CountdownParts], None],
        clock: Optional[Callable[[], datetime]] = None,
        interval: float = 1.0
    ):
        """
        初始化倒计时定时器。

        Args:
            on_tick: 每次计算后的回调
            clock: 返回当前本地时间的函数，默认 timezone.localtime
            interval: 计算间隔（秒）
        """
        self.on_tick = on_tick
        self.clock = clock or timezone.localtime
        self.interval = interval
        self.deadline: Optional[datetime] = None
        self.current: Optional[CountdownParts] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> CountdownParts:
        """
        启动倒计时，立即计算一次并开始后台循环。

        Returns:
            启动时刻的剩余时间
        """
        if self.running:
            return self.current

        self.deadline = end_of_day(self.clock())
        self._stop_event.clear()
        parts = self.tick()

        self._thread = threading.Thread(target=self._run, name='countdown-timer', daemon=True)
        self._thread.start()
        logger.debug(f"倒计时启动，截止时间 {self.deadline.isoformat()}")
        return parts

    def tick(self) -> CountdownParts:
        """按当前时间重新计算剩余时间并通知回调"""
        if self.deadline is None:
            self.deadline = end_of_day(self.clock())
        self.current = remaining_time(self.deadline, self.clock())
        self.on_tick(self.current)
        return self.current

    def stop(self):
        """取消后台循环"""
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=self.interval * 2)
        self._thread = None

    def _run(self):
        while not self._stop_event.wait(self.interval):
            try:
                self.tick()
            except Exception as e:
                logger.error(f"倒计时回调失败: {str(e)}")
                self._stop_event.set()
                raise
