"""Shared retry utilities using tenacity."""

from dataclasses import dataclass

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)


@dataclass
class RequestRetryConfig:
    """Configuration for retries with exponential backoff."""

    max_attempts: int = 3
    min_wait: float = 1.0
    max_wait: float = 10.0
    multiplier: float = 1.0


def get_request_retrying(
    config: RequestRetryConfig | None = None,
    retry_on: type[BaseException] | tuple[type[BaseException], ...] = httpx.RequestError,
) -> AsyncRetrying:
    """Get configured AsyncRetrying, by default for httpx.RequestError (network errors).

    Usage:
        async for attempt in get_request_retrying():
            with attempt:
                response = await client.get(url)

    Only wrap idempotent operations: a retried request may already have
    reached the remote side.

    Args:
        config: Optional retry configuration. Uses defaults if not provided.
        retry_on: Exception type(s) that trigger another attempt.

    Returns:
        AsyncRetrying instance that re-raises the last error when attempts run out.
    """
    cfg = config or RequestRetryConfig()
    return AsyncRetrying(
        retry=retry_if_exception_type(retry_on),
        stop=stop_after_attempt(cfg.max_attempts),
        wait=wait_exponential(
            multiplier=cfg.multiplier,
            min=cfg.min_wait,
            max=cfg.max_wait,
        ),
        reraise=True,
    )
