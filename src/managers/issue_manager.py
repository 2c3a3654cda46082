"""This module contains the logic for splitting an issue tasklist into issues."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from githubapp import Config
from githubapp.events import IssuesEvent

from src.helpers import issue_helper
from src.helpers.exception_helper import extract_error_message
from src.helpers.repository_helper import IssueTracker
from src.models import InvocationContext, NewIssueRef, SplitResult, SplitStatus

logger = logging.getLogger(__name__)


@Config.call_if("issue_splitter.enabled")
def manage(event: IssuesEvent) -> Optional[SplitResult]:
    """
    Split the tasklist of the issue that triggered the event.
    The edit made by the split itself only leaves linked tasks, so it is ignored.
    """
    issue = event.issue
    if not issue_helper.has_unchecked_tasks(issue.body):
        return None
    if not issue_helper.get_pending_tasks(issue_helper.get_task_titles(issue.body)):
        return None
    repository = event.repository
    context = InvocationContext(
        owner=repository.owner.login,
        repo=repository.name,
        issue_number=issue.number,
        issue_body=issue.body,
    )
    return split_issue(context, IssueTracker(event.gh))


def get_sub_issue_body(context: InvocationContext) -> str:
    """Return the body for the issues created from the tasklist."""
    return Config.issue_splitter.issue_body.format(issue_number=context.issue_number)


def create_sub_issues(
    context: InvocationContext, tasks: list[str], tracker: IssueTracker
) -> list[Optional[NewIssueRef]]:
    """
    Create one issue per task, all at the same time.
    Wait for every creation to finish, a failure does not stop the others.

    :return: The created issue for each task, None where the creation failed.
    """
    body = get_sub_issue_body(context)
    with ThreadPoolExecutor(max_workers=Config.issue_splitter.max_workers) as executor:
        futures = [
            executor.submit(
                tracker.create_issue, context.owner, context.repo, task, body
            )
            for task in tasks
        ]

        created_issues = []
        for task, future in zip(tasks, futures):
            try:
                created_issues.append(future.result())
            except Exception as error:
                logger.error(
                    "Failed to create the issue for %r: %s",
                    task,
                    extract_error_message(error),
                )
                created_issues.append(None)
    return created_issues


def _get_tasklist(
    tasks: list[str],
    created_issues: list[Optional[NewIssueRef]],
    kept_tasks: list[str],
) -> list[NewIssueRef]:
    """
    Return the linked and the created issues in the tasks order, dropping the failed ones.
    A linked task that is kept in the body by the strip is not linked again.
    """
    created = iter(created_issues)
    tasklist = []
    for task in tasks:
        if linked_issue := issue_helper.get_linked_issue(task):
            if task not in kept_tasks:
                tasklist.append(linked_issue)
        elif new_issue := next(created):
            tasklist.append(new_issue)
    return tasklist


def split_issue(context: InvocationContext, tracker: IssueTracker) -> SplitResult:
    """
    Create an issue for each unchecked task in the issue body and replace the tasks
    with a tasklist linking the created issues.
    Tasks that are already a link to an issue are kept in the tasklist as they are.
    If there are no tasks to create, nothing is created and the issue is not updated.
    """
    tasks = issue_helper.get_task_titles(context.issue_body)
    pending_tasks = issue_helper.get_pending_tasks(tasks)
    if not pending_tasks:
        logger.info("No subtasks found to create issues for")
        return SplitResult(status=SplitStatus.NOTHING_TO_DO)

    created_issues = create_sub_issues(context, pending_tasks, tracker)
    new_issues = [issue for issue in created_issues if issue]
    failed_tasks = [
        task for task, issue in zip(pending_tasks, created_issues) if issue is None
    ]
    if not new_issues:
        return SplitResult(
            status=SplitStatus.FAILED,
            failed_tasks=failed_tasks,
            error_message=f"Failed to create issues for all the {len(pending_tasks)} subtasks",
        )

    # the last task is kept when the body does not end with a newline
    stripped_body = issue_helper.strip_unchecked_tasks(context.issue_body)
    kept_tasks = []
    if issue_helper.has_unchecked_tasks(stripped_body):
        kept_tasks = issue_helper.get_task_titles(stripped_body)
    body = issue_helper.rewrite_issue_body(
        context.issue_body, _get_tasklist(tasks, created_issues, kept_tasks)
    )
    tracker.update_issue_body(context.owner, context.repo, context.issue_number, body)
    logger.info(
        "%d issues created from %s#%d",
        len(new_issues),
        context.repository_full_name,
        context.issue_number,
    )
    return SplitResult(
        status=SplitStatus.DONE, new_issues=new_issues, failed_tasks=failed_tasks
    )
