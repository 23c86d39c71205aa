"""Admin for round tasks."""

from django.contrib import admin

from core.models import RoundTask
from core.service.clock import default_clock
from core.service.task_status import derive_live_status


@admin.register(RoundTask)
class RoundTaskAdmin(admin.ModelAdmin):
    list_display = (
        "description_preview",
        "patient",
        "category",
        "responsible",
        "deadline",
        "status",
        "live_status",
    )
    list_filter = ("status", "responsible", "category")
    search_fields = ("description", "patient__name")
    list_select_related = ("patient", "category")
    ordering = ("-created_at",)
    readonly_fields = ("status", "completed_at", "created_at", "updated_at")

    def get_readonly_fields(self, request, obj=None):
        fields = list(super().get_readonly_fields(request, obj))
        # 截止时间创建后不可修改
        if obj is not None:
            fields.append("deadline")
        return fields

    def description_preview(self, obj):
        return obj.description[:40] + "..." if len(obj.description) > 40 else obj.description

    description_preview.short_description = "任务描述"

    def live_status(self, obj):
        return derive_live_status(obj, default_clock().now()).label

    live_status.short_description = "实时状态"
