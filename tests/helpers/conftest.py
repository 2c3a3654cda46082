from unittest.mock import Mock

import pytest


@pytest.fixture
def gh():
    return Mock()
