# ============================================
# issues/models/project.py
# ============================================
from django.db import models


class Project(models.Model):
    name = models.TextField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'projects'
        ordering = ['id']

    def __str__(self):
        return self.name
