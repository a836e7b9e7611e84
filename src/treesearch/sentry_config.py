"""Sentry error reporting for exceptions raised inside a search."""

import os
import logging
from typing import Any, Optional

import sentry_sdk
from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


def init_sentry(dsn: Optional[str] = None) -> bool:
    """Initialize Sentry error monitoring.

    Args:
        dsn: Sentry DSN. Read from SENTRY_DSN (and .env) when omitted.

    Returns:
        True if Sentry was initialized, False if DSN not configured.
    """
    load_dotenv(find_dotenv(usecwd=True))

    dsn = dsn or os.getenv("SENTRY_DSN")
    if not dsn:
        return False

    environment = os.getenv("ENVIRONMENT", "development")

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        send_default_pii=False,
        traces_sample_rate=0.0,
        attach_stacktrace=True,
    )
    logger.debug(f"Sentry initialized (environment={environment})")
    return True


def report_exception(exception: BaseException, **context: Any) -> bool:
    """Send an exception raised by caller code to Sentry.

    No-op unless init_sentry() succeeded earlier in the process.

    Args:
        exception: The exception to capture.
        **context: Search context (algorithm, max_depth, ...) attached
            to the event under the "search" key.

    Returns:
        True if the exception was handed to Sentry.
    """
    if not sentry_sdk.is_initialized():
        return False

    with sentry_sdk.new_scope() as scope:
        scope.set_context("search", {k: str(v) for k, v in context.items()})
        sentry_sdk.capture_exception(exception)
    return True


__all__ = ['init_sentry', 'report_exception']
