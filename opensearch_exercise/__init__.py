"""OpenSearch Exercise - index and document lifecycle smoke test."""

__version__ = "0.1.0"

from .client import OpenSearchClient
from .config import ConnectionConfig, load_config
from .exceptions import (
    OpenSearchConfigError,
    OpenSearchConnectionError,
    OpenSearchAuthError,
    OpenSearchQueryError
)
from .result import OperationResult
from .runner import Exercise

__all__ = [
    'OpenSearchClient',
    'ConnectionConfig',
    'load_config',
    'OpenSearchConfigError',
    'OpenSearchConnectionError',
    'OpenSearchAuthError',
    'OpenSearchQueryError',
    'OperationResult',
    'Exercise'
]
