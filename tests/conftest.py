"""
Pytest configuration and fixtures for loops-python tests.
"""

import pytest
import responses as responses_lib

from loops import Loops


BASE_URL = "https://api.example.com/v1"
API_KEY = "test-api-key"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using the responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def client():
    """Loops client pointed at the mocked base URL."""
    with Loops(API_KEY, BASE_URL) as loops:
        yield loops
