import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("patients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="RoundCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True, verbose_name="分类名称")),
                ("icon", models.CharField(blank=True, help_text="前端图标代码，例如 droplet、lungs。", max_length=50, verbose_name="图标标识")),
                ("sort_order", models.PositiveIntegerField(default=0, verbose_name="排序号")),
                ("is_active", models.BooleanField(default=True, verbose_name="是否启用")),
            ],
            options={
                "verbose_name": "查房分类",
                "verbose_name_plural": "查房分类",
                "db_table": "core_round_categories",
                "ordering": ("sort_order", "id"),
            },
        ),
        migrations.CreateModel(
            name="RoundQuestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("text", models.TextField(verbose_name="题目内容")),
                ("seq", models.PositiveIntegerField(default=0, verbose_name="排序号")),
                ("is_active", models.BooleanField(default=True, verbose_name="是否启用")),
                ("category", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="core.roundcategory", verbose_name="所属分类")),
            ],
            options={
                "verbose_name": "查房题目",
                "verbose_name_plural": "查房题目",
                "db_table": "core_round_questions",
                "ordering": ("category", "seq", "id"),
            },
        ),
        migrations.CreateModel(
            name="RoundTask",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="【业务说明】记录数据首次写入时间；【用法】只读字段，自动写入；【示例】2025-01-01 09:00;【参数】无；【返回值】datetime", verbose_name="创建时间")),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True, help_text="【业务说明】记录最新修改时间，方便比对变更；【用法】ORM 保存时自动更新；【示例】2025-01-02 18:30;【参数】无；【返回值】datetime", verbose_name="更新时间")),
                ("description", models.TextField(verbose_name="任务描述")),
                ("responsible", models.CharField(choices=[("Médico", "Médico"), ("Enfermeiro", "Enfermeiro"), ("Fisioterapeuta", "Fisioterapeuta"), ("Farmacêutico", "Farmacêutico"), ("Odontólogo", "Odontólogo"), ("Médico / Enfermeiro", "Médico / Enfermeiro"), ("Médico / Fisioterapeuta", "Médico / Fisioterapeuta")], max_length=40, verbose_name="责任方")),
                ("deadline", models.DateTimeField(help_text="创建时按“当前时间 + N 小时”写入，之后不再修改。", verbose_name="截止时间")),
                ("status", models.CharField(choices=[("alerta", "Alerta"), ("fora_do_prazo", "Fora do Prazo"), ("concluido", "Concluído")], default="alerta", max_length=20, verbose_name="落库状态")),
                ("justification", models.TextField(blank=True, verbose_name="逾期说明")),
                ("completed_at", models.DateTimeField(blank=True, null=True, verbose_name="完成时间")),
                ("category", models.ForeignKey(blank=True, help_text="为空表示通用任务，不属于任何查房分类。", null=True, on_delete=django.db.models.deletion.PROTECT, related_name="tasks", to="core.roundcategory", verbose_name="查房分类")),
                ("patient", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="round_tasks", to="patients.patient", verbose_name="患者")),
            ],
            options={
                "verbose_name": "查房任务",
                "verbose_name_plural": "查房任务",
                "db_table": "core_round_tasks",
                "ordering": ("-created_at", "-id"),
                "indexes": [
                    models.Index(fields=["patient", "status"], name="idx_round_task_patient_status"),
                    models.Index(fields=["status", "deadline"], name="idx_round_task_status_deadline"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ChecklistAnswer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, help_text="【业务说明】记录数据首次写入时间；【用法】只读字段，自动写入；【示例】2025-01-01 09:00;【参数】无；【返回值】datetime", verbose_name="创建时间")),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True, help_text="【业务说明】记录最新修改时间，方便比对变更；【用法】ORM 保存时自动更新；【示例】2025-01-02 18:30;【参数】无；【返回值】datetime", verbose_name="更新时间")),
                ("day", models.DateField(verbose_name="查房日期")),
                ("answer", models.CharField(choices=[("sim", "Sim"), ("não", "Não"), ("nao_se_aplica", "Não se aplica")], max_length=20, verbose_name="回答")),
                ("category", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="answers", to="core.roundcategory", verbose_name="查房分类")),
                ("patient", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="checklist_answers", to="patients.patient", verbose_name="患者")),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="answers", to="core.roundquestion", verbose_name="题目")),
            ],
            options={
                "verbose_name": "查房答题",
                "verbose_name_plural": "查房答题",
                "db_table": "core_checklist_answers",
                "indexes": [
                    models.Index(fields=["patient", "day"], name="idx_checklist_patient_day"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("patient", "category", "question", "day"), name="uniq_checklist_answer_per_day"),
                ],
            },
        ),
    ]
