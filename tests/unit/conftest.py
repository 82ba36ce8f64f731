"""Fixtures for unit tests."""

from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from github_label_sync.github.abc import GitHubClientBase


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def github_adapter() -> MagicMock:
    """A mocked repository-bound GitHub adapter with no existing labels."""
    adapter = MagicMock(spec=GitHubClientBase)
    adapter.owner = "octocat"
    adapter.repo_name = "Hello-World"
    adapter.list_labels = AsyncMock(return_value=[])
    adapter.create_label = AsyncMock()
    adapter.update_label = AsyncMock()
    return adapter
