# -*- coding: utf-8 -*-
"""
Coercion helpers for raw query/body values.

Bodies can arrive as JSON, url-encoded form or multipart, so values may be
str, int, bool or None depending on the client.
"""
from __future__ import annotations
import re
from typing import Any, Optional

from rest_framework import serializers

from issues.exceptions import InvalidFieldValue, MalformedIssueId

_ID_RE = re.compile(r"[0-9]+")
_MAX_ID = 2 ** 63 - 1

_bool_field = serializers.BooleanField()


def parse_issue_id(value: Any) -> int:
    """Normalize a client supplied identifier or raise MalformedIssueId."""
    if isinstance(value, bool) or value is None:
        raise MalformedIssueId(issue_id=value)
    raw = str(value)
    if not _ID_RE.fullmatch(raw):
        raise MalformedIssueId(issue_id=value)
    issue_id = int(raw)
    if issue_id < 1 or issue_id > _MAX_ID:
        raise MalformedIssueId(issue_id=value)
    return issue_id


def parse_bool(value: Any) -> bool:
    try:
        return _bool_field.to_internal_value(value)
    except serializers.ValidationError:
        raise InvalidFieldValue(f"invalid boolean: {value!r}")


def as_text(value: Any) -> Optional[str]:
    """Falsy stays as-is so callers can apply truthy checks; the rest becomes str."""
    if not value:
        return value
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
