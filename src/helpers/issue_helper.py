import logging
import re
from typing import Optional, Sequence

from github.Issue import Issue

from src.helpers.text_helper import extract_markdown_link, markdown_link, markdown_task
from src.models import NewIssueRef

logger = logging.getLogger(__name__)

UNCHECKED_TASK_PATTERN = re.compile(r"^- \[ \] (.+)$", re.MULTILINE)
# Only newline terminated lines are stripped, a last line without "\n" is kept
UNCHECKED_TASK_LINE_PATTERN = re.compile(r"^- \[ \] .+\n", re.MULTILINE)


def has_unchecked_tasks(issue_body: Optional[str]) -> bool:
    """Return if the issue body has at least one unchecked task"""
    return bool(issue_body and UNCHECKED_TASK_PATTERN.search(issue_body))


def get_unchecked_tasks(issue_body: Optional[str]) -> list[str]:
    """Return the unchecked tasks in the issue body, in the order they appear"""
    if not issue_body:
        logger.error("No tasks found in issue body")
        return []

    tasks = UNCHECKED_TASK_PATTERN.findall(issue_body)
    logger.debug("Unchecked tasks: %s", tasks)
    return tasks


def get_linked_issue(task: str) -> Optional[NewIssueRef]:
    """Return the issue the task already links to, if the task is a link"""
    if link := extract_markdown_link(task):
        title, url = link
        return NewIssueRef(title=title, url=url)
    return None


def get_task_titles(issue_body: Optional[str]) -> list[str]:
    """Return the unchecked tasks without the "\\r" left by CRLF line endings"""
    return [task.removesuffix("\r") for task in get_unchecked_tasks(issue_body)]


def get_pending_tasks(tasks: list[str]) -> list[str]:
    """Return the tasks that are not linked to an issue yet"""
    return [task for task in tasks if get_linked_issue(task) is None]


def strip_unchecked_tasks(issue_body: str) -> str:
    """Remove the unchecked task lines from the issue body"""
    return UNCHECKED_TASK_LINE_PATTERN.sub("", issue_body)


def build_tasklist(new_issues: Sequence[NewIssueRef]) -> str:
    """Return a tasklist linking each new issue"""
    return "\n".join(
        markdown_task(markdown_link(new_issue.title, new_issue.url))
        for new_issue in new_issues
    )


def rewrite_issue_body(
    original_body: Optional[str], new_issues: Sequence[NewIssueRef]
) -> str:
    """
    Replace the unchecked tasks in the issue body with a tasklist linking the new issues.
    The new tasklist is appended after a blank line, at the end of the body.

    :param original_body: The current issue body.
    :param new_issues: The issues created from the tasks.
    :return: The new issue body.
    :raises: ValueError if there is no body to rewrite.
    """
    if original_body is None:
        raise ValueError("There is no issue body to rewrite")
    return f"{strip_unchecked_tasks(original_body)}\n\n{build_tasklist(new_issues)}"


def get_new_issue_ref(created_issue: Issue) -> NewIssueRef:
    """Return the reference used to link a created issue"""
    return NewIssueRef(
        title=created_issue.title,
        url=created_issue.html_url,
        number=created_issue.number,
    )
