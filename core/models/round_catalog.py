"""查房分类与题目（只读参照数据）。"""

from django.db import models


class RoundCategoryQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)


class RoundCategory(models.Model):
    """查房分类，例如 Hídrico、Respiratório。"""

    name = models.CharField("分类名称", max_length=100, unique=True)
    icon = models.CharField(
        "图标标识",
        max_length=50,
        blank=True,
        help_text="前端图标代码，例如 droplet、lungs。",
    )
    sort_order = models.PositiveIntegerField("排序号", default=0)
    is_active = models.BooleanField("是否启用", default=True)

    objects = RoundCategoryQuerySet.as_manager()

    class Meta:
        db_table = "core_round_categories"
        verbose_name = "查房分类"
        verbose_name_plural = "查房分类"
        ordering = ("sort_order", "id")

    def __str__(self) -> str:
        return self.name


class RoundQuestionQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True, category__is_active=True)


class RoundQuestion(models.Model):
    """查房题目，每道题只属于一个分类。"""

    category = models.ForeignKey(
        "core.RoundCategory",
        on_delete=models.CASCADE,
        related_name="questions",
        verbose_name="所属分类",
    )
    text = models.TextField("题目内容")
    seq = models.PositiveIntegerField("排序号", default=0)
    is_active = models.BooleanField("是否启用", default=True)

    objects = RoundQuestionQuerySet.as_manager()

    class Meta:
        db_table = "core_round_questions"
        verbose_name = "查房题目"
        verbose_name_plural = "查房题目"
        ordering = ("category", "seq", "id")

    def __str__(self) -> str:
        return self.text[:20]
