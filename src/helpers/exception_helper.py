"""Module to help with GithubExceptions"""

from typing import Union

from github import GithubException


def extract_message_from_error(error: Union[dict[str, str], str]) -> str:
    """Extract the message from error"""
    if isinstance(error, str):
        return error

    if message := error.get("message"):
        return message

    if (field := error.get("field")) and (code := error.get("code")):
        return f"{field} {code}"

    return str(error)


def extract_github_error(exception: GithubException) -> str:
    """Extract the message from GithubException"""
    data = exception.data
    if not isinstance(data, dict):
        return str(exception)
    if errors := data.get("errors"):
        return extract_message_from_error(errors[0])
    return extract_message_from_error(data)


def extract_error_message(exception: Exception) -> str:
    """Extract a message to report from any exception"""
    if isinstance(exception, GithubException):
        return extract_github_error(exception)
    return str(exception) or exception.__class__.__name__
