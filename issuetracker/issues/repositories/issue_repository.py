# -*- coding: utf-8 -*-
"""
Repository layer for Project/Issue (pure DB access).

Selectors and services go through this module; it is the only place that
touches the model managers.
"""
from __future__ import annotations
from typing import Any, Dict, Optional

from django.db import transaction
from django.db.models import QuerySet

from issues.models import Issue, Project


# ============== Queries ==============
def get_project_by_name(name: str) -> Optional[Project]:
    return Project.objects.filter(name=name).order_by("id").first()

def get_issue(project: Project, issue_id: int) -> Optional[Issue]:
    return Issue.objects.filter(project=project, id=issue_id).first()

def filter_issues(project_name: str, filters: Dict[str, Any]) -> QuerySet[Issue]:
    return Issue.objects.filter(project__name=project_name, **filters).order_by("id")


# ============== Mutations ==============
@transaction.atomic
def create_project(name: str) -> Project:
    return Project.objects.create(name=name)

@transaction.atomic
def create_issue(project: Project, data: Dict[str, Any]) -> Issue:
    return Issue.objects.create(project=project, **data)

@transaction.atomic
def save_fields(obj: Issue, patch: Dict[str, Any]) -> Issue:
    fields = []
    for k, v in patch.items():
        setattr(obj, k, v); fields.append(k)
    if fields:
        obj.save(update_fields=fields)
    return obj

@transaction.atomic
def delete(obj: Issue) -> None:
    obj.delete()
