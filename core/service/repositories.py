"""基于 Django ORM 的存储实现。

服务层只依赖这里的 get/list/save 与 upsert/list_by_patient_and_day，
测试或其他存储可以传入同样接口的对象替换。
"""

from __future__ import annotations

from datetime import date
from typing import List, NamedTuple

from core.exceptions import NotFoundError
from core.models import ChecklistAnswer, RoundTask


class TaskRepository:
    """查房任务存储：简单的按 ID 读写。"""

    def get(self, task_id) -> RoundTask:
        try:
            return RoundTask.objects.get(id=task_id)
        except (RoundTask.DoesNotExist, ValueError, TypeError) as exc:
            raise NotFoundError(f"RoundTask {task_id!r} does not exist.") from exc

    def list(self, patient_id=None) -> List[RoundTask]:
        qs = RoundTask.objects.select_related("category")
        if patient_id is not None:
            qs = qs.for_patient(patient_id)
        return list(qs.order_by("-created_at", "-id"))

    def save(self, task: RoundTask, update_fields=None) -> RoundTask:
        if update_fields:
            task.save(update_fields=list(update_fields) + ["updated_at"])
        else:
            task.save()
        return task


class AnswerKey(NamedTuple):
    patient_id: int
    category_id: int
    question_id: int
    day: date


class ChecklistAnswerRepository:
    """查房答题存储：按 (患者, 分类, 题目, 日期) 行级 upsert。"""

    def upsert(self, key: AnswerKey, value: str) -> ChecklistAnswer:
        answer, _ = ChecklistAnswer.objects.update_or_create(
            patient_id=key.patient_id,
            category_id=key.category_id,
            question_id=key.question_id,
            day=key.day,
            defaults={"answer": value},
        )
        return answer

    def list_by_patient_and_day(self, patient_id, day: date) -> List[ChecklistAnswer]:
        return list(
            ChecklistAnswer.objects.for_patient_day(patient_id, day).order_by(
                "category_id", "question_id"
            )
        )

    def list_by_day(self, day: date) -> List[ChecklistAnswer]:
        return list(
            ChecklistAnswer.objects.filter(day=day).order_by(
                "patient_id", "category_id", "question_id"
            )
        )
