"""GitHub Action entry point, split the tasklist of the issue that triggered the workflow."""

import logging
import sys

from flask.cli import load_dotenv

from config import default_configs
from src.helpers import action_helper
from src.helpers.exception_helper import extract_error_message
from src.helpers.repository_helper import IssueTracker
from src.managers import issue_manager
from src.models import SplitStatus

logging.basicConfig(
    stream=sys.stdout,
    format="%(levelname)s:%(module)s:%(funcName)s:%(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def run() -> int:
    """Run the action and return the exit code"""
    try:
        context = action_helper.get_invocation_context()
        if context is None:
            logger.info("The workflow was not triggered by an issue, nothing to do")
            return 0

        token = action_helper.get_input("github_token", required=True)
        result = issue_manager.split_issue(context, IssueTracker.from_token(token))
        if result.status == SplitStatus.NOTHING_TO_DO:
            return 0

        action_helper.set_output(
            "new_issues", [new_issue.model_dump() for new_issue in result.new_issues]
        )
        if result.status == SplitStatus.FAILED:
            action_helper.set_failed(result.error_message)
            return 1
        return 0
    except Exception as error:
        logger.debug("Action failed", exc_info=True)
        action_helper.set_failed(extract_error_message(error))
        return 1


if __name__ == "__main__":  # pragma: no cover
    load_dotenv()
    default_configs()
    sys.exit(run())
