# ============================================
# issues/serializers/issue_serializer.py
# ============================================
from rest_framework import serializers
from issues.models import Issue


class IssueCreateSerializer(serializers.Serializer):
    """Request body for POST. Presence is checked by the service, not here."""
    issue_title = serializers.CharField()
    issue_text = serializers.CharField()
    created_by = serializers.CharField()
    assigned_to = serializers.CharField(required=False, allow_blank=True)
    status_text = serializers.CharField(required=False, allow_blank=True)


class IssueUpdateSerializer(serializers.Serializer):
    _id = serializers.CharField()
    issue_title = serializers.CharField(required=False, allow_blank=True)
    issue_text = serializers.CharField(required=False, allow_blank=True)
    created_by = serializers.CharField(required=False, allow_blank=True)
    assigned_to = serializers.CharField(required=False, allow_blank=True)
    status_text = serializers.CharField(required=False, allow_blank=True)
    open = serializers.BooleanField(required=False)


class IssueDeleteSerializer(serializers.Serializer):
    _id = serializers.CharField()


class IssueOutputSerializer(serializers.ModelSerializer):
    _id = serializers.CharField(source='id', read_only=True)

    class Meta:
        model = Issue
        fields = [
            '_id', 'issue_title', 'issue_text', 'created_on', 'updated_on',
            'created_by', 'assigned_to', 'open', 'status_text'
        ]
