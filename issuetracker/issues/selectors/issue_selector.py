# -*- coding: utf-8 -*-
"""
Selector layer for issues: turns query parameters into ORM filters.
"""
from __future__ import annotations
from typing import Any, Dict, Mapping

from django.db.models import QuerySet

from issues.models import Issue
from issues.repositories import issue_repository as repo
from issues.utils.params import parse_issue_id

TEXT_FILTERS = ("issue_title", "issue_text", "created_by", "assigned_to", "status_text")


def build_issue_filters(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Only present, non-empty parameters become constraints; all of them are
    combined with AND. Raises MalformedIssueId for an unparseable `_id`.
    """
    filters: Dict[str, Any] = {}

    raw_id = params.get("_id") or params.get("id")
    if raw_id:
        filters["id"] = parse_issue_id(raw_id)

    open_value = params.get("open")
    if open_value:
        filters["open"] = open_value == "true"

    for field in TEXT_FILTERS:
        value = params.get(field)
        if value:
            filters[field] = value

    return filters


def list_issues(project_name: str, params: Mapping[str, Any]) -> QuerySet[Issue]:
    return repo.filter_issues(project_name, build_issue_filters(params))
