"""Module to create the githubapp Configs"""

from githubapp import Config


def default_configs() -> None:
    """Create the default configs"""
    Config.BOT_NAME = "issue-splitter[bot]"

    Config.create_config(
        "issue_splitter",
        enabled=True,
        issue_body="This issue was created from the main issue: #{issue_number}",
        max_workers=8,
    )
