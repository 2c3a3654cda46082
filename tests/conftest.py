from unittest.mock import Mock

import pytest
from githubapp import Config

from config import default_configs
from src.helpers.repository_helper import get_repo_cached
from src.models import InvocationContext, NewIssueRef

default_configs()

ISSUE_BODY = "Intro text.\n- [ ] Write docs\n- [ ] Add tests\n"


@pytest.fixture(autouse=True)
def reset_configs():
    yield
    Config.issue_splitter.enabled = True
    get_repo_cached.cache_clear()


@pytest.fixture
def issue_body():
    return ISSUE_BODY


@pytest.fixture
def context(issue_body):
    return InvocationContext(
        owner="heitorpolidoro",
        repo="issue-splitter",
        issue_number=123,
        issue_body=issue_body,
    )


@pytest.fixture
def new_issues():
    return [
        NewIssueRef(title="Write docs", url="https://x/1", number=1),
        NewIssueRef(title="Add tests", url="https://x/2", number=2),
    ]


@pytest.fixture
def repository_mock():
    repository = Mock(
        full_name="heitorpolidoro/issue-splitter",
        owner=Mock(login="heitorpolidoro"),
    )
    # "name" is a Mock constructor argument
    repository.name = "issue-splitter"
    return repository


@pytest.fixture
def issue(repository_mock, issue_body):
    return Mock(
        repository=repository_mock,
        number=123,
        title="Test issue",
        body=issue_body,
    )


@pytest.fixture
def event(issue, repository_mock):
    return Mock(
        hook_installation_target_id=1,
        installation_id=1,
        issue=issue,
        repository=repository_mock,
    )


@pytest.fixture
def tracker(new_issues):
    tracker = Mock()
    tracker.create_issue.side_effect = lambda owner, repo, title, body: next(
        new_issue for new_issue in new_issues if new_issue.title == title
    )
    return tracker
