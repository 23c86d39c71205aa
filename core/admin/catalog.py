"""Admin for the round checklist catalog."""

from django.contrib import admin

from core.models import RoundCategory, RoundQuestion


class RoundQuestionInline(admin.TabularInline):
    """分类下的题目内联编辑。"""

    model = RoundQuestion
    extra = 0
    fields = ("seq", "text", "is_active")
    ordering = ("seq",)


@admin.register(RoundCategory)
class RoundCategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "icon", "sort_order", "is_active")
    list_editable = ("sort_order",)
    list_filter = ("is_active",)
    search_fields = ("name",)
    ordering = ("sort_order", "id")
    inlines = [RoundQuestionInline]


@admin.register(RoundQuestion)
class RoundQuestionAdmin(admin.ModelAdmin):
    list_display = ("text_preview", "category", "seq", "is_active")
    list_filter = ("category", "is_active")
    search_fields = ("text", "category__name")
    ordering = ("category", "seq")

    def text_preview(self, obj):
        return obj.text[:50] + "..." if len(obj.text) > 50 else obj.text

    text_preview.short_description = "题目内容"
