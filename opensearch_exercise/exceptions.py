"""Custom exceptions for the OpenSearch exercise client."""

from typing import Any, Optional


class OpenSearchConfigError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


class OpenSearchConnectionError(Exception):
    """Raised when connection to OpenSearch fails."""
    pass


class OpenSearchAuthError(Exception):
    """Raised when authentication details are missing."""
    pass


class OpenSearchQueryError(Exception):
    """Raised when the cluster rejects a request."""

    def __init__(
            self,
            message: str,
            status_code: Optional[int] = None,
            error: Optional[str] = None,
            info: Any = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.info = info
