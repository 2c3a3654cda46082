""" Repository helper functions."""

import logging
from functools import lru_cache

import github
from github import Github
from github.Repository import Repository

from src.helpers.issue_helper import get_new_issue_ref
from src.models import NewIssueRef

logger = logging.getLogger(__name__)


@lru_cache
def get_repo_cached(repository_name: str, gh: github.Github) -> Repository:
    """Get repository by name."""
    return gh.get_repo(repository_name)


class IssueTracker:
    """Create and update issues through the GitHub API"""

    def __init__(self, gh: Github):
        self.gh = gh

    @classmethod
    def from_token(cls, token: str) -> "IssueTracker":
        """Create an IssueTracker authenticated with a token"""
        return cls(github.Github(auth=github.Auth.Token(token)))

    def _get_repository(self, owner: str, repo: str) -> Repository:
        return get_repo_cached(f"{owner}/{repo}", gh=self.gh)

    def create_issue(self, owner: str, repo: str, title: str, body: str) -> NewIssueRef:
        """Create an issue and return the reference to it"""
        created_issue = self._get_repository(owner, repo).create_issue(title=title, body=body)
        logger.info("Issue %s/%s#%s created", owner, repo, created_issue.number)
        return get_new_issue_ref(created_issue)

    def update_issue_body(self, owner: str, repo: str, issue_number: int, body: str) -> bool:
        """Replace the body of an issue"""
        issue = self._get_repository(owner, repo).get_issue(issue_number)
        issue.edit(body=body)
        logger.info("Issue %s/%s#%s body updated", owner, repo, issue_number)
        return True
