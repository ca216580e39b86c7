# ============================================
# issues/views/issue_view.py
# ============================================
import logging
from collections.abc import Mapping

from django.db import DatabaseError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from issues.exceptions import (
    InvalidFieldValue,
    IssueNotFound,
    MalformedIssueId,
    MissingIssueId,
    NoUpdateFields,
    RequiredFieldsMissing,
)
from issues.selectors.issue_selector import list_issues
from issues.serializers.issue_serializer import (
    IssueCreateSerializer,
    IssueDeleteSerializer,
    IssueOutputSerializer,
    IssueUpdateSerializer,
)
from issues.services.issue_service import create_issue, delete_issue, update_issue
from .utils import (
    extend_schema, extend_schema_view, OpenApiResponse,
    path_str, q_bool, q_str, result_or_error, server_error,
)

logger = logging.getLogger(__name__)

SERVER_ERROR = {"error": "Server error"}


def _body(request):
    # A JSON array or scalar body carries no fields.
    return request.data if isinstance(request.data, Mapping) else {}


@extend_schema_view(
    get=extend_schema(
        tags=["Issue"],
        summary="List issues of a project",
        parameters=[
            path_str("project", "Project name"),
            q_str("_id", "Issue id"),
            q_bool("open", "'true' or 'false'"),
            q_str("issue_title", "Exact title"),
            q_str("issue_text", "Exact text"),
            q_str("created_by", "Exact creator"),
            q_str("assigned_to", "Exact assignee"),
            q_str("status_text", "Exact status text"),
        ],
        responses={200: OpenApiResponse(IssueOutputSerializer(many=True)), **server_error()},
    ),
    post=extend_schema(
        tags=["Issue"],
        summary="Create an issue",
        parameters=[path_str("project", "Project name")],
        request=IssueCreateSerializer,
        responses={
            200: OpenApiResponse(IssueOutputSerializer, description="Created issue, or an IssueError payload"),
            **server_error(),
        },
    ),
    put=extend_schema(
        tags=["Issue"],
        summary="Update an issue",
        parameters=[path_str("project", "Project name")],
        request=IssueUpdateSerializer,
        responses=result_or_error("Updated"),
    ),
    delete=extend_schema(
        tags=["Issue"],
        summary="Delete an issue",
        parameters=[path_str("project", "Project name")],
        request=IssueDeleteSerializer,
        responses=result_or_error("Deleted"),
    ),
)
class IssueView(APIView):
    """
    /api/issues/<project>

    GET: filter issues by any of _id, open, issue_title, issue_text,
         created_by, assigned_to, status_text
    POST: create an issue (issue_title, issue_text, created_by required)
    PUT: partial update by _id
    DELETE: delete by _id

    Validation and not-found outcomes are answered with HTTP 200 and an
    `error` key; only internal failures use HTTP 500.
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, project):
        try:
            issues = list_issues(project, request.query_params)
            data = IssueOutputSerializer(issues, many=True).data
        except (MalformedIssueId, DatabaseError):
            logger.exception("[issues] GET failed project=%s", project)
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(data)

    def post(self, request, project):
        body = _body(request)
        try:
            issue = create_issue(
                project_name=project,
                issue_title=body.get("issue_title"),
                issue_text=body.get("issue_text"),
                created_by=body.get("created_by"),
                assigned_to=body.get("assigned_to"),
                status_text=body.get("status_text"),
            )
        except RequiredFieldsMissing as exc:
            return Response(exc.as_payload())
        except DatabaseError:
            logger.exception("[issues] POST failed project=%s", project)
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(IssueOutputSerializer(issue).data)

    def put(self, request, project):
        body = _body(request)
        issue_id = body.get("_id")
        try:
            update_issue(project_name=project, issue_id=issue_id, data=body)
        except (MissingIssueId, NoUpdateFields) as exc:
            return Response(exc.as_payload())
        except (IssueNotFound, InvalidFieldValue) as exc:
            logger.warning("[issues] PUT rejected project=%s _id=%r: %s", project, issue_id, exc)
            return Response({"error": "could not update", "_id": issue_id})
        except DatabaseError:
            logger.exception("[issues] PUT failed project=%s _id=%r", project, issue_id)
            return Response({"error": "could not update", "_id": issue_id})
        return Response({"result": "successfully updated", "_id": issue_id})

    def delete(self, request, project):
        body = _body(request)
        issue_id = body.get("_id")
        try:
            delete_issue(project_name=project, issue_id=issue_id)
        except MissingIssueId as exc:
            return Response(exc.as_payload())
        except IssueNotFound as exc:
            logger.warning("[issues] DELETE rejected project=%s _id=%r: %s", project, issue_id, exc)
            return Response({"error": "could not delete", "_id": issue_id})
        except DatabaseError:
            logger.exception("[issues] DELETE failed project=%s _id=%r", project, issue_id)
            return Response({"error": "could not delete", "_id": issue_id})
        return Response({"result": "successfully deleted", "_id": issue_id})
