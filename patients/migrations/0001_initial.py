from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="【业务说明】记录数据首次写入时间；【用法】只读字段，自动写入；【示例】2025-01-01 09:00;【参数】无；【返回值】datetime", verbose_name="创建时间")),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True, help_text="【业务说明】记录最新修改时间，方便比对变更；【用法】ORM 保存时自动更新；【示例】2025-01-02 18:30;【参数】无；【返回值】datetime", verbose_name="更新时间")),
                ("name", models.CharField(help_text="【业务说明】患者姓名；【用法】列表与任务卡片展示；【示例】Maria Silva；【参数】str；【返回值】str", max_length=120, verbose_name="患者姓名")),
                ("bed_number", models.PositiveIntegerField(help_text="【业务说明】病房床位；【用法】列表默认按床位排序；【示例】3；【参数】int；【返回值】int", verbose_name="床位号")),
                ("is_active", models.BooleanField(default=True, help_text="【业务说明】出院后置为 False；【用法】查房列表只展示在院患者；【参数】bool；【返回值】bool", verbose_name="是否在院")),
            ],
            options={
                "verbose_name": "患者",
                "verbose_name_plural": "患者",
                "db_table": "patients",
                "ordering": ("bed_number", "id"),
            },
        ),
    ]
