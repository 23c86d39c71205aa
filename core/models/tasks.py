"""查房任务（告警）模型。"""

from django.db import models

from patients.models.base import TimeStampedModel

from . import choices


class RoundTaskQuerySet(models.QuerySet):
    """查房任务查询集封装，提供常用过滤方法。"""

    def for_patient(self, patient_id):
        """按患者过滤。"""
        return self.filter(patient_id=patient_id)

    def open(self):
        """筛选尚未完成（落库状态非 concluido）的任务。"""
        return self.exclude(status=choices.TaskStatus.CONCLUIDO)

    def completed(self):
        """筛选已完成任务。"""
        return self.filter(status=choices.TaskStatus.CONCLUIDO)


class RoundTask(TimeStampedModel):
    """
    查房中发现问题后创建的待办任务，带责任方和截止时间。

    status 只保存显式命令写入的状态（创建 → alerta，完成 → concluido），
    实时状态由 core.service.task_status.derive_live_status 按当前时间推导。
    """

    patient = models.ForeignKey(
        "patients.Patient",
        on_delete=models.CASCADE,
        related_name="round_tasks",
        verbose_name="患者",
    )
    category = models.ForeignKey(
        "core.RoundCategory",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="tasks",
        verbose_name="查房分类",
        help_text="为空表示通用任务，不属于任何查房分类。",
    )
    description = models.TextField("任务描述")
    responsible = models.CharField(
        "责任方",
        max_length=40,
        choices=choices.Responsible.choices,
    )
    deadline = models.DateTimeField(
        "截止时间",
        help_text="创建时按“当前时间 + N 小时”写入，之后不再修改。",
    )
    status = models.CharField(
        "落库状态",
        max_length=20,
        choices=choices.TaskStatus.choices,
        default=choices.TaskStatus.ALERTA,
    )
    justification = models.TextField("逾期说明", blank=True)
    completed_at = models.DateTimeField("完成时间", null=True, blank=True)

    objects = RoundTaskQuerySet.as_manager()

    class Meta:
        db_table = "core_round_tasks"
        verbose_name = "查房任务"
        verbose_name_plural = "查房任务"
        ordering = ("-created_at", "-id")
        indexes = [
            models.Index(fields=["patient", "status"], name="idx_round_task_patient_status"),
            models.Index(fields=["status", "deadline"], name="idx_round_task_status_deadline"),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.patient_id} - {self.description[:20]}"

    @property
    def is_completed(self) -> bool:
        """落库状态是否已完成。"""
        return self.status == choices.TaskStatus.CONCLUIDO

    def mark_completed(self, when, save=True):
        """标记任务为已完成。

        Args:
            when: 完成时间，由上层服务根据注入的时钟传入。
            save: 是否立即保存到数据库。
        """
        self.status = choices.TaskStatus.CONCLUIDO
        self.completed_at = when
        if save:
            self.save(update_fields=["status", "completed_at", "updated_at"])
