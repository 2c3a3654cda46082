"""
Methods to talk with the GitHub Actions runner
The runner passes inputs and the event through environment variables and reads outputs from files
"""

import json
import logging
import os
import uuid
from typing import Any, Optional

from src.models import InvocationContext

logger = logging.getLogger(__name__)


class ActionInputError(Exception):
    """A required action input is missing"""


def get_input(name: str, required: bool = False) -> str:
    """
    Get an action input.
    The runner exposes the input `name` as the environment variable INPUT_<NAME>.

    :param name: The input name, as declared in action.yml.
    :param required: Raise if the input is not set.
    :return: The input value stripped or an empty string.
    :raises: ActionInputError if the input is required and not set.
    """
    value = os.getenv(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    if required and not value:
        raise ActionInputError(f"Input required and not supplied: {name}")
    return value


def set_output(name: str, value: Any) -> None:
    """Set an action output, serializing to JSON anything that is not a string"""
    if not isinstance(value, str):
        value = json.dumps(value)
    if output_file := os.getenv("GITHUB_OUTPUT"):
        with open(output_file, "a", encoding="utf-8") as f:
            if "\n" in value:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                f.write(f"{name}={value}\n")
    else:
        print(f"::set-output name={name}::{value}")


def set_failed(message: str) -> None:
    """Report the error to the runner, the caller must exit with a non-zero code"""
    print(f"::error::{message}")


def read_event(event_path: Optional[str] = None) -> dict[str, Any]:
    """Read the payload of the event that triggered the workflow"""
    event_path = event_path or os.getenv("GITHUB_EVENT_PATH")
    if not event_path or not os.path.exists(event_path):
        logger.warning("No event payload found")
        return {}
    with open(event_path, encoding="utf-8") as f:
        return json.load(f)


def get_invocation_context(event: Optional[dict[str, Any]] = None) -> Optional[InvocationContext]:
    """Return the context of the triggering issue or None if the workflow was not triggered by an issue"""
    if event is None:
        event = read_event()
    if not (issue := event.get("issue")):
        return None

    if repository := event.get("repository"):
        owner, repo = repository["owner"]["login"], repository["name"]
    else:
        owner, repo = os.environ["GITHUB_REPOSITORY"].split("/", 1)

    return InvocationContext(
        owner=owner,
        repo=repo,
        issue_number=issue["number"],
        issue_body=issue.get("body"),
    )
