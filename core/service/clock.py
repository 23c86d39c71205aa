"""时间来源：统一提供 now / today，便于注入固定时间。"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Protocol

from django.utils import timezone


class ClockSource(Protocol):
    def now(self) -> datetime:
        ...

    def today(self) -> date:
        ...


class DjangoClock:
    """
    【功能说明】
    - 读取系统当前时间；today 以 settings.TIME_ZONE 为准切分自然日。
    """

    def now(self) -> datetime:
        return timezone.now()

    def today(self) -> date:
        return timezone.localdate()


def ensure_aware(value: datetime) -> datetime:
    """naive 时间按 settings.TIME_ZONE 解释为本地时间。"""
    if timezone.is_naive(value):
        return timezone.make_aware(value)
    return value


class FixedClock:
    """
    【功能说明】
    - 固定在某一时刻的时钟，用于测试或“按指定时间点”重算状态。

    【使用方法】
    - `FixedClock(datetime(2025, 1, 1, 8, tzinfo=...))`；
    - `clock.advance(hours=3)` 向后拨动时间。
    """

    def __init__(self, now: datetime):
        self._now = ensure_aware(now)

    def now(self) -> datetime:
        return self._now

    def today(self) -> date:
        return timezone.localdate(self._now)

    def advance(self, **delta) -> datetime:
        self._now = self._now + timedelta(**delta)
        return self._now


def default_clock() -> ClockSource:
    return DjangoClock()
