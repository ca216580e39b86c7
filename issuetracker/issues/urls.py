from django.urls import re_path
from issues.views.issue_view import IssueView

app_name = 'issues'

urlpatterns = [
    # /api/issues/<project> and /api/issues/<project>/
    re_path(r'^(?P<project>[^/]+)/?$', IssueView.as_view(), name='issue-resource'),
]
