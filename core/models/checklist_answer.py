"""查房答题明细模型。"""

from django.db import models

from patients.models.base import TimeStampedModel

from . import choices


class ChecklistAnswerQuerySet(models.QuerySet):
    def for_patient_day(self, patient_id, day):
        """按患者 + 日期过滤。"""
        return self.filter(patient_id=patient_id, day=day)


class ChecklistAnswer(TimeStampedModel):
    """单道查房题目的回答。

    每个患者每道题每天最多一行，写入走 upsert；历史日期的答题不删除。
    """

    patient = models.ForeignKey(
        "patients.Patient",
        on_delete=models.CASCADE,
        related_name="checklist_answers",
        verbose_name="患者",
    )
    category = models.ForeignKey(
        "core.RoundCategory",
        on_delete=models.PROTECT,
        related_name="answers",
        verbose_name="查房分类",
    )
    question = models.ForeignKey(
        "core.RoundQuestion",
        on_delete=models.PROTECT,
        related_name="answers",
        verbose_name="题目",
    )
    day = models.DateField("查房日期")
    answer = models.CharField(
        "回答",
        max_length=20,
        choices=choices.ChecklistAnswerValue.choices,
    )

    objects = ChecklistAnswerQuerySet.as_manager()

    class Meta:
        db_table = "core_checklist_answers"
        verbose_name = "查房答题"
        verbose_name_plural = "查房答题"
        constraints = [
            models.UniqueConstraint(
                fields=["patient", "category", "question", "day"],
                name="uniq_checklist_answer_per_day",
            ),
        ]
        indexes = [
            models.Index(fields=["patient", "day"], name="idx_checklist_patient_day"),
        ]

    def __str__(self) -> str:
        return f"{self.patient_id} - Q{self.question_id} - {self.day}: {self.answer}"
