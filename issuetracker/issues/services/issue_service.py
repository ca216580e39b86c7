# -*- coding: utf-8 -*-
"""
Service layer for issues.
- Presence checks and default values live here.
- Update uses truthy-replace for text fields: an empty value keeps what is
  stored. `open` overwrites whenever it is sent, `false` included.
- Malformed identifiers are reported exactly like missing issues.
"""
from __future__ import annotations
import logging
from typing import Any, Mapping

from django.db import transaction
from django.utils import timezone

from issues.exceptions import (
    IssueNotFound,
    MalformedIssueId,
    MissingIssueId,
    NoUpdateFields,
    RequiredFieldsMissing,
)
from issues.models import Issue, Project
from issues.repositories import issue_repository as repo
from issues.utils.params import as_text, parse_bool, parse_issue_id

logger = logging.getLogger(__name__)

UPDATABLE_TEXT_FIELDS = ("issue_title", "issue_text", "created_by", "assigned_to", "status_text")


def _locate(project_name: str, raw_id: Any) -> Issue:
    try:
        issue_id = parse_issue_id(raw_id)
    except MalformedIssueId:
        logger.warning("[issues] malformed _id=%r project=%s", raw_id, project_name)
        raise IssueNotFound(issue_id=raw_id)

    project = repo.get_project_by_name(project_name)
    if project is None:
        raise IssueNotFound(f"project '{project_name}' not found", issue_id=raw_id)

    issue = repo.get_issue(project, issue_id)
    if issue is None:
        raise IssueNotFound(issue_id=raw_id)
    return issue


def create_issue(
    *,
    project_name: str,
    issue_title: Any = None,
    issue_text: Any = None,
    created_by: Any = None,
    assigned_to: Any = None,
    status_text: Any = None,
) -> Issue:
    """Append a new open issue, creating the project on first use."""
    if not issue_title or not issue_text or not created_by:
        raise RequiredFieldsMissing()

    now = timezone.now()
    data = {
        "issue_title": as_text(issue_title),
        "issue_text": as_text(issue_text),
        "created_by": as_text(created_by),
        "assigned_to": as_text(assigned_to) or "",
        "status_text": as_text(status_text) or "",
        "open": True,
        "created_on": now,
        "updated_on": now,
    }

    with transaction.atomic():
        project: Project = repo.get_project_by_name(project_name)
        if project is None:
            project = repo.create_project(project_name)
            logger.info("[issues] project created name=%s", project_name)
        issue = repo.create_issue(project, data)

    logger.info("[issues] issue created id=%s project=%s", issue.id, project_name)
    return issue


def update_issue(*, project_name: str, issue_id: Any, data: Mapping[str, Any]) -> Issue:
    if not issue_id:
        raise MissingIssueId()

    has_text = any(data.get(field) for field in UPDATABLE_TEXT_FIELDS)
    if not has_text and "open" not in data:
        raise NoUpdateFields(issue_id=issue_id)

    with transaction.atomic():
        issue = _locate(project_name, issue_id)

        patch = {
            field: as_text(data.get(field)) or getattr(issue, field)
            for field in UPDATABLE_TEXT_FIELDS
        }
        if "open" in data:
            patch["open"] = parse_bool(data.get("open"))
        patch["updated_on"] = timezone.now()

        repo.save_fields(issue, patch)

    logger.info("[issues] issue updated id=%s project=%s", issue.id, project_name)
    return issue


def delete_issue(*, project_name: str, issue_id: Any) -> None:
    if not issue_id:
        raise MissingIssueId()

    with transaction.atomic():
        issue = _locate(project_name, issue_id)
        pk = issue.id
        repo.delete(issue)

    logger.info("[issues] issue deleted id=%s project=%s", pk, project_name)
