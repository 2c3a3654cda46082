"""This module contains the GitHub App webhook application."""

import logging
import os
import sys
from typing import NoReturn

import sentry_sdk
from flask import Flask
from flask.cli import load_dotenv
from githubapp import webhook_handler
from githubapp.events import IssueEditedEvent, IssueOpenedEvent, IssuesEvent

from config import default_configs
from src.managers import issue_manager

logging.basicConfig(
    stream=sys.stdout,
    format="%(levelname)s:%(module)s:%(funcName)s:%(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def sentry_init() -> NoReturn:  # pragma: no cover
    """Initialize sentry only if SENTRY_DSN is present"""
    if sentry_dsn := os.getenv("SENTRY_DSN"):
        # Initialize Sentry SDK for error logging
        sentry_sdk.init(
            dsn=sentry_dsn,
            traces_sample_rate=1.0,
            profiles_sample_rate=1.0,
        )
        logger.info("Sentry initialized")


app = Flask(__name__)
sentry_init()
webhook_handler.handle_with_flask(
    app, use_default_index=False, config_file=".issue-splitter.yaml"
)

load_dotenv()
default_configs()


@webhook_handler.add_handler(IssueOpenedEvent)
@webhook_handler.add_handler(IssueEditedEvent)
def handle_issue(event: IssuesEvent) -> NoReturn:
    """
    handle the Issues Open and Edit events
    Calling the Issue Manager to:
    - Create an issue for each unchecked task in the issue body
    - Replace the tasks with a tasklist linking the created issues
    """
    if result := issue_manager.manage(event):
        logger.info("Issue %s split: %s", event.issue.number, result.status.value)


@app.route("/", methods=["GET"])
def index() -> str:  # pragma: no cover
    """Return the index homepage"""
    return "Issue Splitter"
