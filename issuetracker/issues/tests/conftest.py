import pytest
from issues.services.issue_service import create_issue

PROJECT = "apitest"


@pytest.fixture
def project_name():
    return PROJECT


@pytest.fixture
def issue(db, project_name):
    return create_issue(
        project_name=project_name,
        issue_title="Issue 1",
        issue_text="Functional Test",
        created_by="fCC",
        assigned_to="Dom",
        status_text="Not Done",
    )


@pytest.fixture
def second_issue(db, project_name, issue):
    return create_issue(
        project_name=project_name,
        issue_title="Issue 2",
        issue_text="Functional Test",
        created_by="fCC",
    )


@pytest.fixture
def other_project_issue(db):
    return create_issue(
        project_name="other",
        issue_title="Elsewhere",
        issue_text="Belongs to another project",
        created_by="bob",
    )
