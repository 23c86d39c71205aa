"""查房分类与题目目录（只读）。"""

from __future__ import annotations

from typing import Dict, List, Set

from django.db.models import Count, Q

from core.models import RoundCategory, RoundQuestion


class CategoryCatalog:
    """
    【功能说明】
    - 提供分类 → 题目数量、分类 → 题目 ID 列表的只读映射；
    - 只统计启用中的分类与题目。
    """

    @staticmethod
    def categories() -> List[RoundCategory]:
        return list(RoundCategory.objects.active().order_by("sort_order", "id"))

    @classmethod
    def category_ids(cls) -> List[int]:
        return [category.id for category in cls.categories()]

    @staticmethod
    def question_counts() -> Dict[int, int]:
        """
        【返回值说明】
        - dict，{category_id: 启用题目数}；没有题目的分类值为 0。
        """
        rows = RoundCategory.objects.active().annotate(
            question_total=Count("questions", filter=Q(questions__is_active=True))
        )
        return {row.id: row.question_total for row in rows}

    @staticmethod
    def active_question_ids() -> Set[int]:
        """启用中的分类下、启用中的题目 ID 集合。"""
        return set(RoundQuestion.objects.active().values_list("id", flat=True))

    @staticmethod
    def question_ids(category_id: int) -> List[int]:
        return list(
            RoundQuestion.objects.active()
            .filter(category_id=category_id)
            .order_by("seq", "id")
            .values_list("id", flat=True)
        )
