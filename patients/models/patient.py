from django.db import models

from patients.models.base import TimeStampedModel


class Patient(TimeStampedModel):
    """
    【业务说明】病房在院患者的最小参照档案，供查房任务与查房答题引用。
    【用法】患者档案的增删改属于外部表单，这里只保留引用所需字段。
    【使用示例】`Patient.objects.create(name="Maria Silva", bed_number=3)`。
    【参数】字段定义见下方；继承 TimeStampedModel 自动带有时间戳。
    【返回值】标准 Django Model。
    """

    name = models.CharField(
        "患者姓名",
        max_length=120,
        help_text="【业务说明】患者姓名；【用法】列表与任务卡片展示；【示例】Maria Silva；【参数】str；【返回值】str",
    )
    bed_number = models.PositiveIntegerField(
        "床位号",
        help_text="【业务说明】病房床位；【用法】列表默认按床位排序；【示例】3；【参数】int；【返回值】int",
    )
    is_active = models.BooleanField(
        "是否在院",
        default=True,
        help_text="【业务说明】出院后置为 False；【用法】查房列表只展示在院患者；【参数】bool；【返回值】bool",
    )

    class Meta:
        db_table = "patients"
        verbose_name = "患者"
        verbose_name_plural = "患者"
        ordering = ("bed_number", "id")

    def __str__(self) -> str:
        return f"Leito {self.bed_number} - {self.name}"
