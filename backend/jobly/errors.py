"""Typed errors raised by the data-access layer.

Each error carries the HTTP status the API answers with; the handlers in
``jobly.main`` turn them into ``{"detail": message}`` responses.
"""

from fastapi import status


class JoblyError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(JoblyError):
    """Malformed input, empty update payload, missing referenced company."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateError(BadRequestError):
    """A job with the same title already exists."""


class NotFoundError(JoblyError):
    status_code = status.HTTP_404_NOT_FOUND
