"""Tests for error handling middleware."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastmcp.exceptions import NotFoundError, ValidationError

from mime_scout.middleware.errors import ErrorHandlingMiddleware
from mime_scout.services.database import DatabaseError


@pytest.fixture
def mock_logger() -> MagicMock:
    """Create a mock logger."""
    return MagicMock()


@pytest.fixture
def mock_context() -> MagicMock:
    """Create a mock tool call context."""
    context = MagicMock()
    context.method = "tools/call"
    context.message = MagicMock()
    context.message.name = "mime_lookup"
    return context


@pytest.mark.asyncio
async def test_passes_through_success(
    mock_logger: MagicMock,
    mock_context: MagicMock,
) -> None:
    """Successful results are returned untouched and nothing is logged."""
    middleware = ErrorHandlingMiddleware(logger=mock_logger)
    call_next = AsyncMock(return_value={"input": "html", "result": "text/html"})

    result = await middleware.on_message(mock_context, call_next)

    assert result == {"input": "html", "result": "text/html"}
    mock_logger.error.assert_not_called()
    mock_logger.warning.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [NotFoundError("Unknown tool: mime_guess"), ValidationError("path is required")],
)
async def test_client_errors_logged_as_warning(
    mock_logger: MagicMock,
    mock_context: MagicMock,
    error: Exception,
) -> None:
    """Unknown targets and bad arguments are warnings, then re-raised."""
    middleware = ErrorHandlingMiddleware(logger=mock_logger, include_traceback=True)

    with pytest.raises(type(error)):
        await middleware.on_message(mock_context, AsyncMock(side_effect=error))

    mock_logger.warning.assert_called_once()
    args = mock_logger.warning.call_args[0]
    assert args[1] == "tools/call mime_lookup"
    assert args[2] == type(error).__name__
    mock_logger.error.assert_not_called()


@pytest.mark.asyncio
async def test_database_error_points_at_setting(
    mock_logger: MagicMock,
    mock_context: MagicMock,
) -> None:
    """A broken database is logged at ERROR with a configuration hint."""
    middleware = ErrorHandlingMiddleware(logger=mock_logger)
    error = DatabaseError("Invalid JSON in MIME database /srv/db.json")

    with pytest.raises(DatabaseError):
        await middleware.on_message(mock_context, AsyncMock(side_effect=error))

    mock_logger.error.assert_called_once()
    args = mock_logger.error.call_args[0]
    assert "MIME_SCOUT_DATABASE" in args[0]
    assert args[2] is error


@pytest.mark.asyncio
async def test_unexpected_error_includes_traceback_when_enabled(
    mock_logger: MagicMock,
    mock_context: MagicMock,
) -> None:
    """Other exceptions are logged at ERROR with an optional traceback."""
    middleware = ErrorHandlingMiddleware(logger=mock_logger, include_traceback=True)

    with pytest.raises(RuntimeError, match="boom"):
        await middleware.on_message(mock_context, AsyncMock(side_effect=RuntimeError("boom")))

    args, kwargs = mock_logger.error.call_args
    assert "RuntimeError" in args
    assert kwargs["exc_info"] is True


@pytest.mark.asyncio
async def test_resource_reads_name_the_uri(mock_logger: MagicMock) -> None:
    """Resource errors name the URI instead of a tool."""
    middleware = ErrorHandlingMiddleware(logger=mock_logger)
    context = MagicMock()
    context.method = "resources/read"
    context.message = MagicMock(spec=["uri"])
    context.message.uri = "mime://type/text/nope"

    with pytest.raises(NotFoundError):
        await middleware.on_message(context, AsyncMock(side_effect=NotFoundError("nope")))

    assert mock_logger.warning.call_args[0][1] == "resources/read mime://type/text/nope"


def test_default_logger() -> None:
    """Without a logger the module logger is used."""
    assert isinstance(ErrorHandlingMiddleware().logger, logging.Logger)
