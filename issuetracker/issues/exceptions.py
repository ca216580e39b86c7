# -*- coding: utf-8 -*-
"""
Domain errors raised by the issue services.

The view layer turns each one into the JSON payload returned to the client;
none of them is allowed to reach DRF's default exception handler.
"""
from __future__ import annotations
from typing import Any, Dict, Optional


class IssueTrackerError(Exception):
    message = "issue tracker error"

    def __init__(self, message: Optional[str] = None, *, issue_id: Any = None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.issue_id = issue_id

    def as_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.issue_id is not None:
            payload["_id"] = self.issue_id
        return payload


class RequiredFieldsMissing(IssueTrackerError):
    message = "required field(s) missing"


class MissingIssueId(IssueTrackerError):
    message = "missing _id"


class NoUpdateFields(IssueTrackerError):
    message = "no update field(s) sent"


class MalformedIssueId(IssueTrackerError):
    message = "malformed _id"


class InvalidFieldValue(IssueTrackerError):
    message = "invalid field value"


class IssueNotFound(IssueTrackerError):
    message = "issue not found"
