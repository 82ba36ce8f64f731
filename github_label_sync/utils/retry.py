"""Retry decorator for GitHub API rate limits.

Only rate limit responses are retried. Any other error is raised to the caller
immediately.
"""

import asyncio
import functools
import inspect
import time
from typing import Any, Callable, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _wait_time_from_headers(exc: RequestFailed, default: float) -> float:
    """Read the wait time from the retry-after or x-ratelimit-reset headers."""
    headers = exc.response.headers
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)
            return default

    rate_limit_reset = headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
            return default
        current_timestamp = int(time.time())
        if reset_timestamp > current_timestamp:
            return float(reset_timestamp - current_timestamp + 1)
    return default


def _is_rate_limit_error(exc: RequestFailed) -> bool:
    status_code = exc.response.status_code
    if status_code == 429:
        return True
    return status_code == 403 and ("rate limit" in str(exc).lower() or exc.response.headers.get("x-ratelimit-remaining") == "0")


def retry_on_rate_limit(
    max_retries: int = 5,
    initial_delay: float = 10.0,
    max_delay: float = 300.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async functions when they hit a GitHub rate limit.

    The wait time comes from the exception (githubkit rate limit exceptions),
    then the retry-after / x-ratelimit-reset headers, then exponential backoff.
    It is always capped at max_delay.

    Args:
        max_retries: Maximum number of retry attempts
        initial_delay: Initial delay in seconds between retries
        max_delay: Maximum delay in seconds between retries
        exponential_base: Base for exponential backoff calculation

    Example:
        @retry_on_rate_limit()
        async def list_labels(self) -> list[Label]:
            ...
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded) as e:
                    if attempt >= max_retries:
                        logger.error(
                            "Max retries reached for GitHub rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            error_type=type(e).__name__,
                        )
                        raise
                    retry_after = getattr(e, "retry_after", None)
                    wait_time = retry_after.total_seconds() if retry_after else delay
                    rate_limit_type = "primary" if isinstance(e, PrimaryRateLimitExceeded) else "secondary"
                except RequestFailed as e:
                    if not _is_rate_limit_error(e):
                        raise
                    if attempt >= max_retries:
                        logger.error(
                            "Max retries reached for rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            status_code=e.response.status_code,
                        )
                        raise
                    wait_time = _wait_time_from_headers(e, delay)
                    rate_limit_type = "http"

                wait_time = min(wait_time, max_delay)
                logger.warning(
                    "GitHub rate limit exceeded, waiting before retrying",
                    function=func.__name__,
                    rate_limit_type=rate_limit_type,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    wait_time=wait_time,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)
                attempt += 1

        return async_wrapper  # type: ignore

    return decorator
