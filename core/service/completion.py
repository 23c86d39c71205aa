"""查房分类完成度汇总。"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Mapping, Set

from core.service.catalog import CategoryCatalog
from core.service.clock import ClockSource, default_clock
from core.service.repositories import ChecklistAnswerRepository


def completed_categories(
    patient_id: int,
    day: date,
    answers: Iterable,
    category_question_counts: Mapping[int, int],
) -> List[int]:
    """
    【功能说明】
    - 计算患者在某天已完成的查房分类；
    - 按分类统计“不同题目”的作答数，作答数 >= 目录题目数即视为完成；
    - 只看是否作答，不看回答内容（sim / não / nao_se_aplica 都算）。

    【参数说明】
    - patient_id: int，患者 ID。
    - day: date，查房日期。
    - answers: 可迭代的答题记录，需带 patient_id/category_id/question_id/day 属性；
      不属于该患者或该日期的记录会被忽略。
    - category_question_counts: {category_id: 题目数}，不在映射中的分类不会完成。

    【返回值说明】
    - List[int]，按分类 ID 升序。
    """
    answered: Dict[int, Set[int]] = defaultdict(set)
    for answer in answers:
        if answer.patient_id != patient_id or answer.day != day:
            continue
        answered[answer.category_id].add(answer.question_id)

    completed = []
    for category_id, question_ids in answered.items():
        required = category_question_counts.get(category_id)
        if required is None:
            continue
        if len(question_ids) >= required:
            completed.append(category_id)
    return sorted(completed)


def progress(completed: Iterable[int], total_categories: Iterable[int]) -> float:
    """分类维度的完成比例（0.0 ~ 1.0），不是题目维度。"""
    total = set(total_categories)
    if not total:
        return 0.0
    return len(set(completed) & total) / len(total)


class ChecklistCompletionService:
    """
    【功能说明】
    - 从答题存储拉取某天的答题，结合目录题目数计算完成分类；
    - 供病房列表的进度条与分类卡片高亮使用。
    """

    def __init__(
        self,
        repository: ChecklistAnswerRepository | None = None,
        catalog: CategoryCatalog | None = None,
        clock: ClockSource | None = None,
    ):
        self.repository = repository or ChecklistAnswerRepository()
        self.catalog = catalog or CategoryCatalog()
        self.clock = clock or default_clock()

    def completion_for_patient(self, patient_id: int, day: date | None = None) -> List[int]:
        day = day or self.clock.today()
        answers = self._current_answers(
            self.repository.list_by_patient_and_day(patient_id, day)
        )
        return completed_categories(patient_id, day, answers, self.catalog.question_counts())

    def completion_for_day(self, day: date | None = None) -> Dict[int, List[int]]:
        """
        【返回值说明】
        - dict，{patient_id: [已完成分类 ID]}，只包含当天有答题的患者。
        """
        day = day or self.clock.today()
        counts = self.catalog.question_counts()
        answers_by_patient: Dict[int, list] = defaultdict(list)
        for answer in self._current_answers(self.repository.list_by_day(day)):
            answers_by_patient[answer.patient_id].append(answer)
        return {
            patient_id: completed_categories(patient_id, day, answers, counts)
            for patient_id, answers in answers_by_patient.items()
        }

    def progress_for_patient(self, patient_id: int, day: date | None = None) -> float:
        completed = self.completion_for_patient(patient_id, day)
        return progress(completed, self.catalog.category_ids())

    def _current_answers(self, answers: Iterable) -> List:
        # 题目停用后的历史回答不计入完成度，否则会顶替尚未作答的启用题目
        active_ids = self.catalog.active_question_ids()
        return [answer for answer in answers if answer.question_id in active_ids]
