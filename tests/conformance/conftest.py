"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.parser_runner import ParserRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [ParserRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners.
    Currently includes:
    - parser: Uses the vexlib recursive-descent parser
    """
    return request.param
