"""查房答题存取服务。"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List

from django.core.exceptions import ValidationError

from core.exceptions import NotFoundError
from core.models import ChecklistAnswer, RoundQuestion, choices
from core.service.clock import ClockSource, default_clock
from core.service.repositories import AnswerKey, ChecklistAnswerRepository
from patients.models import Patient

logger = logging.getLogger(__name__)


class ChecklistAnswerService:
    """
    【功能说明】
    - 单题粒度保存查房回答：同一 (患者, 分类, 题目, 日期) 只保留一行；
    - 同一患者同一天不同题目的写入互不覆盖。
    """

    def __init__(
        self,
        repository: ChecklistAnswerRepository | None = None,
        clock: ClockSource | None = None,
    ):
        self.repository = repository or ChecklistAnswerRepository()
        self.clock = clock or default_clock()

    def upsert(
        self,
        patient_id: int,
        category_id: int,
        question_id: int,
        answer: str,
        day: date | None = None,
    ) -> ChecklistAnswer:
        """
        保存（新增或覆盖）一道题的回答。

        【参数说明】
        - patient_id / category_id / question_id: 主键组合。
        - answer: str，ChecklistAnswerValue 取值。
        - day: date | None，默认使用时钟的 today。

        【返回值说明】
        - ChecklistAnswer 实例。

        【异常说明】
        - ValidationError: answer 无效。
        - NotFoundError: 患者或题目不存在、题目已停用，或题目不属于该分类。
        """
        if answer not in choices.ChecklistAnswerValue.values:
            raise ValidationError("answer is invalid.")
        if not Patient.objects.filter(pk=patient_id).exists():
            raise NotFoundError(f"Patient {patient_id!r} does not exist.")
        try:
            question = RoundQuestion.objects.active().get(pk=question_id)
        except RoundQuestion.DoesNotExist as exc:
            raise NotFoundError(
                f"RoundQuestion {question_id!r} does not exist or is inactive."
            ) from exc
        if question.category_id != category_id:
            raise NotFoundError(
                f"RoundQuestion {question_id!r} does not belong to category {category_id!r}."
            )

        day = day or self.clock.today()
        saved = self.repository.upsert(
            AnswerKey(patient_id, category_id, question_id, day), answer
        )
        logger.info(
            "查房答题已保存 patient_id=%s category_id=%s question_id=%s day=%s",
            patient_id,
            category_id,
            question_id,
            day,
        )
        return saved

    def answers_for(self, patient_id: int, day: date | None = None) -> List[ChecklistAnswer]:
        """患者某天所有分类的回答。"""
        return self.repository.list_by_patient_and_day(patient_id, day or self.clock.today())

    def answers_for_category(
        self,
        patient_id: int,
        category_id: int,
        day: date | None = None,
    ) -> Dict[int, str]:
        """
        【功能说明】
        - 打开某个分类的答题页时回填已有回答。

        【返回值说明】
        - dict，{question_id: answer}。
        """
        return {
            row.question_id: row.answer
            for row in self.answers_for(patient_id, day)
            if row.category_id == category_id
        }
