"""Admin for checklist answers (read-mostly)."""

from django.contrib import admin

from core.models import ChecklistAnswer


@admin.register(ChecklistAnswer)
class ChecklistAnswerAdmin(admin.ModelAdmin):
    list_display = ("day", "patient", "category", "question", "answer", "updated_at")
    list_filter = ("day", "category", "answer")
    search_fields = ("patient__name",)
    list_select_related = ("patient", "category", "question")
    date_hierarchy = "day"
    ordering = ("-day", "patient", "category", "question")
    readonly_fields = ("created_at", "updated_at")
