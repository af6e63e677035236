"""Tests for database session handling and request log context."""

from unittest.mock import MagicMock

import pytest
import structlog
from fastapi import HTTPException

from storehive.infra import database
from storehive.infra.logging import bind_request_context


@pytest.fixture
def mock_logger(monkeypatch, session_factory) -> MagicMock:
    """Route get_db_session at the test database and capture its log calls."""
    mock = MagicMock()
    monkeypatch.setattr(database, "logger", mock)
    monkeypatch.setattr(database, "get_session_factory", lambda: session_factory)
    return mock


class TestGetDbSession:

    @pytest.mark.asyncio
    async def test_rejected_request_is_not_logged_as_error(self, mock_logger):
        with pytest.raises(HTTPException):
            async with database.get_db_session():
                raise HTTPException(status_code=404)

        mock_logger.error.assert_not_called()
        mock_logger.info.assert_called_once_with("Database session rolled back", status_code=404)

    @pytest.mark.asyncio
    async def test_unexpected_failure_is_logged_as_error(self, mock_logger):
        with pytest.raises(RuntimeError):
            async with database.get_db_session():
                raise RuntimeError("boom")

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["error_type"] == "RuntimeError"


class TestBindRequestContext:

    def teardown_method(self):
        structlog.contextvars.clear_contextvars()

    def test_binds_request_fields(self):
        bind_request_context("GET", "/api/hives", "7")

        assert structlog.contextvars.get_contextvars() == {
            "method": "GET",
            "path": "/api/hives",
            "user_id": "7",
        }

    def test_replaces_previous_request(self):
        bind_request_context("PUT", "/api/hives/1", "7")
        bind_request_context("GET", "/health")

        assert structlog.contextvars.get_contextvars() == {"method": "GET", "path": "/health"}
