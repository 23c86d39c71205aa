"""查房任务实时状态推导。"""

from __future__ import annotations

from datetime import datetime

from core.models.choices import LiveStatus, TaskStatus


def derive_live_status_from(
    persisted_status: str,
    deadline: datetime,
    now: datetime,
) -> LiveStatus:
    """
    【功能说明】
    - 根据落库状态、截止时间和当前时间计算任务的实时状态；
    - 纯函数，不读写数据库，也不读取系统时间。

    【推导规则】
    1. 落库为 concluido → concluido（终态，与时间无关）；
    2. now >= deadline → fora_do_prazo（恰好等于截止时间也算逾期）；
    3. now < deadline → 落库为 alerta 时保持 alerta，否则为 no_prazo。

    【参数说明】
    - persisted_status: str，TaskStatus 取值。
    - deadline: datetime，截止时间。
    - now: datetime，当前时间（由调用方注入）。

    【返回值说明】
    - LiveStatus。
    """
    if persisted_status == TaskStatus.CONCLUIDO:
        return LiveStatus.CONCLUIDO
    if now >= deadline:
        return LiveStatus.FORA_DO_PRAZO
    if persisted_status == TaskStatus.ALERTA:
        return LiveStatus.ALERTA
    return LiveStatus.NO_PRAZO


def derive_live_status(task, now: datetime) -> LiveStatus:
    """对单个任务（RoundTask 或任何带 status/deadline 属性的对象）推导实时状态。"""
    return derive_live_status_from(task.status, task.deadline, now)
