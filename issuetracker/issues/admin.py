from django.contrib import admin
from .models import Project, Issue


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)


@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ("id", "project", "issue_title", "created_by", "assigned_to", "open", "updated_on")
    list_filter = ("open",)
    search_fields = ("issue_title", "issue_text", "created_by", "assigned_to")
    raw_id_fields = ("project",)
