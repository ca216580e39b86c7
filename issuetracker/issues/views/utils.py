# views/utils.py
"""
Shared tooling for drf-spectacular docs on the issue APIView.
"""
from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiResponse, inline_serializer,
)
from drf_spectacular.types import OpenApiTypes
from rest_framework import serializers

# ---- Reusable payload schemas
ErrorSerializer = inline_serializer(
    name="IssueError",
    fields={
        "error": serializers.CharField(),
        "_id": serializers.CharField(required=False),
    }
)

ResultSerializer = inline_serializer(
    name="IssueResult",
    fields={
        "result": serializers.CharField(),
        "_id": serializers.CharField(),
    }
)

# ---- Param helpers

def path_str(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.PATH, description=description)

def q_str(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description)

def q_bool(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.BOOL, OpenApiParameter.QUERY, required=required, description=description)

# ---- Convenience for common responses

def result_or_error(description: str):
    """Validation failures share the 200 status with successes on this API."""
    return {
        200: OpenApiResponse(
            response=ResultSerializer,
            description=f"{description}; failures answer an IssueError payload",
        ),
    }


def server_error():
    return {500: OpenApiResponse(ErrorSerializer, description="Server error")}
