"""查房任务生命周期服务：创建、完成、补充说明与按实时状态查询。"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

from django.conf import settings
from django.core.exceptions import ValidationError

from core.exceptions import NotFoundError
from core.models import RoundCategory, RoundTask, choices
from core.service.clock import ClockSource, default_clock, ensure_aware
from core.service.repositories import TaskRepository
from core.service.task_status import derive_live_status
from patients.models import Patient

logger = logging.getLogger(__name__)

GENERAL_CATEGORY_NAME = "Geral"


class TaskLifecycleService:
    """
    【功能说明】
    - 负责查房任务的显式命令（创建 / 完成 / 补充逾期说明）；
    - 按注入的当前时间推导实时状态，供仪表盘四个分组使用；
    - 实时状态从不落库，每次读取都重新计算。

    【使用方法】
    - `service = TaskLifecycleService()` 使用 ORM 存储与系统时钟；
    - 测试中可传入 `TaskLifecycleService(clock=FixedClock(...))`。
    """

    def __init__(
        self,
        repository: TaskRepository | None = None,
        clock: ClockSource | None = None,
    ):
        self.repository = repository or TaskRepository()
        self.clock = clock or default_clock()

    # ------------------------------------------------------------------
    # 命令
    # ------------------------------------------------------------------
    def create(
        self,
        description: str,
        responsible: str,
        patient_id: int,
        category_id: int | None,
        deadline_offset_hours: Any,
    ) -> RoundTask:
        """
        创建一条查房任务（告警）。

        【功能说明】
        - 校验描述、责任方与截止小时数；
        - 落库状态固定为 alerta，截止时间 = 当前时间 + N 小时；
        - category_id 为空表示通用任务。

        【参数说明】
        - description: str，任务描述，不能为空。
        - responsible: str，责任方（choices.Responsible）。
        - patient_id: int，患者 ID。
        - category_id: int | None，查房分类 ID。
        - deadline_offset_hours: 截止小时数，必须为正数。

        【返回值说明】
        - RoundTask 实例。

        【异常说明】
        - ValidationError: 参数无效。
        - NotFoundError: 患者或分类不存在。
        """
        description = (description or "").strip()
        if not description:
            raise ValidationError("description is required.")
        if responsible not in choices.Responsible.values:
            raise ValidationError("responsible is invalid.")
        offset_hours = self._parse_offset_hours(deadline_offset_hours)

        if not self._exists(Patient, patient_id):
            raise NotFoundError(f"Patient {patient_id!r} does not exist.")
        if category_id is not None and not self._exists(RoundCategory, category_id):
            raise NotFoundError(f"RoundCategory {category_id!r} does not exist.")

        now = self.clock.now()
        task = RoundTask(
            patient_id=patient_id,
            category_id=category_id,
            description=description,
            responsible=responsible,
            deadline=now + timedelta(hours=float(offset_hours)),
            status=choices.TaskStatus.ALERTA,
        )
        self.repository.save(task)
        logger.info(
            "查房任务已创建 task_id=%s patient_id=%s category_id=%s deadline=%s",
            task.id,
            patient_id,
            category_id,
            task.deadline.isoformat(),
        )
        return task

    def complete(self, task_id) -> RoundTask:
        """
        标记任务为已完成（concluido）。

        【功能说明】
        - 幂等：已完成的任务再次调用直接返回，保留首次完成时间；
        - 逾期任务同样可以完成，这是离开 fora_do_prazo 的唯一途径。

        【异常说明】
        - NotFoundError: 任务不存在。
        """
        task = self.repository.get(task_id)
        if task.is_completed:
            logger.debug("查房任务已是完成状态，忽略重复完成 task_id=%s", task.id)
            return task

        task.mark_completed(self.clock.now(), save=False)
        self.repository.save(task, update_fields=["status", "completed_at"])
        logger.info("查房任务已完成 task_id=%s", task.id)
        return task

    def justify(self, task_id, text: str) -> RoundTask:
        """
        写入逾期说明，不改变落库状态。

        【功能说明】
        - 任意实时状态下都允许写入（界面只在逾期时展示入口）；
        - 同一任务多次写入以最后一次为准，原样保存，不做裁剪。

        【异常说明】
        - ValidationError: text 不是字符串。
        - NotFoundError: 任务不存在。
        """
        if not isinstance(text, str):
            raise ValidationError("justification must be a string.")
        task = self.repository.get(task_id)
        task.justification = text
        self.repository.save(task, update_fields=["justification"])
        logger.info("查房任务已补充说明 task_id=%s", task.id)
        return task

    # ------------------------------------------------------------------
    # 查询
    # ------------------------------------------------------------------
    def derive(self, task: RoundTask, now: datetime | None = None) -> choices.LiveStatus:
        """单个任务的实时状态；now 为空时取注入时钟的当前时间。"""
        return derive_live_status(task, self._resolve_now(now))

    def list_by_live_status(
        self,
        status: str,
        now: datetime | None = None,
    ) -> List[RoundTask]:
        """
        按实时状态筛选全部任务。

        【功能说明】
        - alerta 分组只包含“落库为 alerta 且未逾期、未完成”的任务，
          是所有告警来源任务的真子集。

        【异常说明】
        - ValidationError: status 不是 LiveStatus 取值。
        """
        target = self._parse_live_status(status)
        now = self._resolve_now(now)
        return [
            task
            for task in self.repository.list()
            if derive_live_status(task, now) == target
        ]

    def list_for_patient(
        self,
        patient_id: int,
        now: datetime | None = None,
        status: str | None = None,
    ) -> List[RoundTask]:
        """患者的任务列表，可按实时状态过滤（患者详情页的告警列表）。"""
        target = self._parse_live_status(status) if status is not None else None
        now = self._resolve_now(now)
        tasks = self.repository.list(patient_id=patient_id)
        if target is None:
            return tasks
        return [task for task in tasks if derive_live_status(task, now) == target]

    def summarize(
        self,
        now: datetime | None = None,
        patient_id: int | None = None,
    ) -> Dict[str, int]:
        """
        统计四个实时状态分组的任务数量（仪表盘“当日概览”）。

        【返回值说明】
        - dict，四个 key 始终存在，例如：
          {"alerta": 2, "no_prazo": 0, "fora_do_prazo": 1, "concluido": 5}
        """
        now = self._resolve_now(now)
        counts = {status: 0 for status in choices.LiveStatus.values}
        for task in self.repository.list(patient_id=patient_id):
            counts[derive_live_status(task, now).value] += 1
        return counts

    def alerts_by_category(self, now: datetime | None = None) -> List[Dict[str, Any]]:
        """
        按查房分类统计当前仍处于 alerta 的任务。

        【返回值说明】
        - List[dict]，按数量倒序：
          [{"category_id": 2, "name": "Hídrico", "count": 3, "percentage": 100.0}, ...]
        - percentage 以数量最多的分类为 100。
        - 通用任务（无分类）归入 category_id=None、name="Geral"。
        """
        now = self._resolve_now(now)
        buckets: Dict[Any, Dict[str, Any]] = {}
        for task in self.repository.list():
            if derive_live_status(task, now) != choices.LiveStatus.ALERTA:
                continue
            bucket = buckets.get(task.category_id)
            if bucket is None:
                name = task.category.name if task.category_id else GENERAL_CATEGORY_NAME
                bucket = {"category_id": task.category_id, "name": name, "count": 0}
                buckets[task.category_id] = bucket
            bucket["count"] += 1

        rows = sorted(buckets.values(), key=lambda row: (-row["count"], row["name"]))
        max_count = rows[0]["count"] if rows else 0
        for row in rows:
            row["percentage"] = row["count"] * 100.0 / max_count if max_count else 0.0
        return rows

    # ------------------------------------------------------------------
    # 内部工具
    # ------------------------------------------------------------------
    @staticmethod
    def _parse_offset_hours(raw: Any) -> Decimal:
        if raw is None or isinstance(raw, bool):
            raise ValidationError("deadline_offset_hours is required.")
        if isinstance(raw, str):
            # 表单下拉值形如 "2 horas"，取首个数字部分
            parts = raw.split()
            if not parts:
                raise ValidationError("deadline_offset_hours is required.")
            raw = parts[0]
        try:
            hours = Decimal(str(raw))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError("deadline_offset_hours is invalid.") from exc
        if not hours.is_finite() or hours <= 0:
            raise ValidationError("deadline_offset_hours must be positive.")
        max_hours = getattr(settings, "ROUND_TASK_MAX_DEADLINE_HOURS", None)
        if max_hours and hours > max_hours:
            raise ValidationError(f"deadline_offset_hours must not exceed {max_hours}.")
        return hours

    def _resolve_now(self, now: datetime | None) -> datetime:
        if now is None:
            return self.clock.now()
        return ensure_aware(now)

    @staticmethod
    def _parse_live_status(status: str) -> choices.LiveStatus:
        if status not in choices.LiveStatus.values:
            raise ValidationError("status is invalid.")
        return choices.LiveStatus(status)

    @staticmethod
    def _exists(model, pk) -> bool:
        try:
            return model.objects.filter(pk=pk).exists()
        except (ValueError, TypeError):
            return False
