# ============================================
# issues/models/__init__.py
# ============================================
from .project import Project
from .issue import Issue

__all__ = [
    'Project',
    'Issue',
]
