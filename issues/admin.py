from django.contrib import admin
from .models import Comment, Issue, IssueHistory, Notification


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    raw_id_fields = ("author",)


@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "department", "category", "priority", "status", "student", "assigned_to", "created_at")
    list_filter = ("status", "priority", "department", "category")
    search_fields = ("title", "description", "student__email")
    raw_id_fields = ("student", "assigned_to")
    readonly_fields = ("created_at", "updated_at", "resolved_at")
    inlines = [CommentInline]


@admin.register(IssueHistory)
class IssueHistoryAdmin(admin.ModelAdmin):
    list_display = ("issue", "field_name", "old_value", "new_value", "actor", "created_at")
    list_filter = ("field_name",)


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("user", "issue", "title", "read", "created_at")
    list_filter = ("read",)
