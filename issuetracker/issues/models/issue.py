# ============================================
# issues/models/issue.py
# ============================================
from django.db import models


class Issue(models.Model):
    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='issues'
    )
    issue_title = models.TextField()
    issue_text = models.TextField()
    created_by = models.TextField()
    assigned_to = models.TextField(blank=True, default='')
    status_text = models.TextField(blank=True, default='')
    open = models.BooleanField(default=True)
    created_on = models.DateTimeField()
    updated_on = models.DateTimeField()

    class Meta:
        db_table = 'issues'
        ordering = ['id']
        indexes = [
            models.Index(fields=['project', 'open'], name='issues_project_open_idx'),
        ]

    def __str__(self):
        return f"{self.project.name} - {self.issue_title}"
