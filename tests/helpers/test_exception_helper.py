import pytest
from github import GithubException

from src.helpers.exception_helper import (
    extract_error_message,
    extract_github_error,
    extract_message_from_error,
)


@pytest.mark.parametrize(
    "error_dict,expected_return",
    [
        ({"message": "Error Message"}, "Error Message"),
        ({"field": "Field", "code": "Code"}, "Field Code"),
        ({"data": "any_data"}, "{'data': 'any_data'}"),
        ("Plain error", "Plain error"),
    ],
)
def test_extract_message_from_error(error_dict, expected_return):
    assert expected_return == extract_message_from_error(error_dict)


@pytest.mark.parametrize(
    "data,expected_return",
    [
        (
            {"message": "Validation Failed", "errors": [{"field": "title", "code": "missing"}]},
            "title missing",
        ),
        ({"message": "Bad credentials"}, "Bad credentials"),
    ],
    ids=["With errors", "Without errors"],
)
def test_extract_github_error(data, expected_return):
    assert extract_github_error(GithubException(422, data)) == expected_return


@pytest.mark.parametrize(
    "exception,expected_return",
    [
        (GithubException(401, {"message": "Bad credentials"}), "Bad credentials"),
        (ValueError("Invalid value"), "Invalid value"),
        (KeyError(), "KeyError"),
    ],
)
def test_extract_error_message(exception, expected_return):
    assert extract_error_message(exception) == expected_return
