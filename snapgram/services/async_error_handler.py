"""
Async error handling utilities for remote backend operations.

This module provides the error taxonomy for the remote document store,
classification of backend and transport errors, and the helpers that turn
remote failures into sentinel return values at the comment store boundary.
"""

import asyncio
import copy
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar
from functools import wraps

import httpx
from fastapi import HTTPException, status
from postgrest.exceptions import APIError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RemoteStoreError(Exception):
    """Base exception for remote document store operations."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


class RemoteRecordNotFoundError(RemoteStoreError):
    """Exception for a record id that does not exist in its collection."""
    pass


class RemoteUnavailableError(RemoteStoreError):
    """Exception for transport failures and timed out remote calls."""
    pass


class RemoteRejectedError(RemoteStoreError):
    """Exception for requests the backend refused."""
    pass


class RemoteErrorHandler:
    """
    Error handler for remote document store operations.

    Provides error classification, logging, and appropriate HTTP responses
    for the different kinds of backend failures.
    """

    # Checked in order; the first matching type wins
    ERROR_MAPPINGS = (
        (RemoteRecordNotFoundError, {
            'status_code': status.HTTP_404_NOT_FOUND,
            'detail': 'Record not found',
            'retryable': False
        }),
        (RemoteUnavailableError, {
            'status_code': status.HTTP_503_SERVICE_UNAVAILABLE,
            'detail': 'Remote store unavailable',
            'retryable': True
        }),
        (RemoteRejectedError, {
            'status_code': status.HTTP_502_BAD_GATEWAY,
            'detail': 'Remote store rejected the request',
            'retryable': False
        }),
        (APIError, {
            'status_code': status.HTTP_502_BAD_GATEWAY,
            'detail': 'Remote store rejected the request',
            'retryable': False
        }),
        (httpx.TimeoutException, {
            'status_code': status.HTTP_504_GATEWAY_TIMEOUT,
            'detail': 'Remote store timed out',
            'retryable': True
        }),
        (asyncio.TimeoutError, {
            'status_code': status.HTTP_504_GATEWAY_TIMEOUT,
            'detail': 'Remote store timed out',
            'retryable': True
        }),
        (httpx.HTTPError, {
            'status_code': status.HTTP_503_SERVICE_UNAVAILABLE,
            'detail': 'Remote store connection failed',
            'retryable': True
        }),
    )

    @classmethod
    def classify_error(cls, error: Exception) -> Dict[str, Any]:
        """
        Classify a remote error and return appropriate response information.

        Args:
            error: The exception that occurred

        Returns:
            Dictionary with status_code, detail, and retryable flag
        """
        for exc_type, mapping in cls.ERROR_MAPPINGS:
            if isinstance(error, exc_type):
                return mapping.copy()

        return {
            'status_code': status.HTTP_500_INTERNAL_SERVER_ERROR,
            'detail': 'An unexpected remote store error occurred',
            'retryable': False
        }

    @classmethod
    def log_error(cls, error: Exception, operation_name: str) -> Dict[str, Any]:
        """Log an error at a level matching its classification and return the classification."""
        error_info = cls.classify_error(error)

        if error_info['retryable']:
            logger.warning(f"Transient error in {operation_name}: {error!r}")
        else:
            logger.error(f"Error in {operation_name}: {error!r}")

        return error_info

    @classmethod
    def handle_error(cls, error: Exception, operation_name: str = "remote operation") -> HTTPException:
        """
        Handle a remote error and return appropriate HTTPException.

        Args:
            error: The exception that occurred
            operation_name: Name of the operation for logging

        Returns:
            HTTPException with appropriate status code and message
        """
        error_info = cls.log_error(error, operation_name)
        return HTTPException(
            status_code=error_info['status_code'],
            detail=error_info['detail']
        )

    @classmethod
    def is_retryable(cls, error: Exception) -> bool:
        return cls.classify_error(error).get('retryable', False)


async def with_timeout(awaitable: Awaitable[T], seconds: Optional[float]) -> T:
    """
    Await a single remote call, bounded by a timeout.

    Args:
        awaitable: The pending remote call
        seconds: Timeout in seconds, or None for no bound

    Raises:
        RemoteUnavailableError: If the call does not settle in time
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError as e:
        raise RemoteUnavailableError(f"Remote call timed out after {seconds}s", e) from e


def absorb_remote_errors(operation_name: str, sentinel: Any = None):
    """
    Decorator converting any failure of an async operation into a sentinel value.

    The error is logged and a deep copy of ``sentinel`` is returned, so no
    exception crosses the decorated boundary.

    Args:
        operation_name: Name of the operation for logging
        sentinel: Value returned when the operation fails

    Returns:
        Decorated function with error absorption
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                RemoteErrorHandler.log_error(e, operation_name)
                return copy.deepcopy(sentinel)
        return wrapper
    return decorator
