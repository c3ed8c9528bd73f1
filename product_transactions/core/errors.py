"""Error kinds raised by the query, aggregation and seeding layers.

Each error knows the HTTP status it maps to; the application turns them into
``{"error": ..., "details": ...}`` JSON bodies in ``main.py``.
"""

from typing import Any, Optional


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingParameter(ServiceError):
    status_code = 400


class InvalidInput(ServiceError):
    status_code = 400


class StoreUnavailable(ServiceError):
    status_code = 500


class UpstreamFetchFailure(ServiceError):
    status_code = 500
