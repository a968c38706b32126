"""Pytest configuration and fixtures."""

import json

import pytest
import requests
from loguru import logger
from unittest.mock import Mock


@pytest.fixture
def mock_show_response():
    """Mock TVmaze show payload."""
    return {
        "id": 396,
        "url": "https://www.tvmaze.com/shows/396/the-daily-show",
        "name": "The Daily Show",
        "type": "Talk Show",
        "language": "English",
        "genres": ["Comedy", "News"],
        "status": "Running",
        "externals": {"tvrage": 2310, "thetvdb": 71256, "imdb": "tt0115147"},
    }


@pytest.fixture
def mock_search_response():
    """Mock TVmaze search/shows payload."""
    return [
        {"score": 0.9, "show": {"id": 180, "name": "Firefly"}},
        {"score": 0.4, "show": {"id": 41428, "name": "Firefly Lane"}},
    ]


@pytest.fixture
def make_response():
    """Factory for Mock responses mimicking requests.Response."""

    def _make(payload=None, status_code=200):
        response = Mock()
        response.status_code = status_code
        response.json.return_value = payload
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Client Error", response=response
            )
        else:
            response.raise_for_status.return_value = None
        return response

    return _make


@pytest.fixture
def make_real_response():
    """Factory for real requests.Response objects with a given body."""

    def _make(body, status_code=200, url="http://api.tvmaze.com/"):
        response = requests.Response()
        response.status_code = status_code
        response.url = url
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        response._content = body.encode("utf-8")
        response.encoding = "utf-8"
        return response

    return _make


@pytest.fixture
def log_messages():
    """Capture (level, message) pairs logged by the tvmaze package."""
    messages = []
    logger.enable("tvmaze")
    handler_id = logger.add(
        lambda message: messages.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
    logger.disable("tvmaze")
