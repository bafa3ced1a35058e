"""Connection settings loaded from the environment."""

import os
from typing import Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, SecretStr, field_validator
from .exceptions import OpenSearchAuthError, OpenSearchConfigError

PASSWORD_ENV = "OPENSEARCH_INITIAL_ADMIN_PASSWORD"
URL_ENV = "OPENSEARCH_URL"
USERNAME_ENV = "OPENSEARCH_USERNAME"
VERIFY_CERTS_ENV = "OPENSEARCH_VERIFY_CERTS"
TIMEOUT_ENV = "OPENSEARCH_TIMEOUT"

DEFAULT_ENDPOINT = "https://localhost:9200"
DEFAULT_USERNAME = "admin"
DEFAULT_TIMEOUT = 30

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


class ConnectionConfig(BaseModel):
    """Immutable connection settings for one run."""

    model_config = ConfigDict(frozen=True)

    endpoints: Tuple[str, ...] = (DEFAULT_ENDPOINT,)
    username: str = DEFAULT_USERNAME
    password: SecretStr
    verify_certs: bool = False
    timeout: int = DEFAULT_TIMEOUT

    @field_validator("endpoints")
    @classmethod
    def _require_endpoint(cls, value):
        if not value:
            raise ValueError("at least one endpoint is required")
        return value

    @field_validator("username")
    @classmethod
    def _require_username(cls, value):
        if not value:
            raise OpenSearchAuthError("Username and password are required")
        return value

    @field_validator("password")
    @classmethod
    def _require_password(cls, value):
        if not value.get_secret_value():
            raise OpenSearchAuthError("Username and password are required")
        return value

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value):
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    def get_auth(self) -> Tuple[str, str]:
        """HTTP Basic Auth tuple of (username, password)."""
        return (self.username, self.password.get_secret_value())


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise OpenSearchConfigError(f"{name} must be true or false, got {raw!r}")


def _parse_timeout(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise OpenSearchConfigError(f"{TIMEOUT_ENV} must be an integer, got {raw!r}")


def load_config(
        environ: Optional[Mapping[str, str]] = None,
        endpoints: Optional[Tuple[str, ...]] = None,
        username: Optional[str] = None,
        verify_certs: Optional[bool] = None,
        timeout: Optional[int] = None
) -> ConnectionConfig:
    """
    Build the connection config from environment variables.

    Explicit arguments win over the environment. The password can only
    come from the environment.

    Args:
        environ: Mapping to read instead of ``os.environ``
        endpoints: Endpoint URLs overriding OPENSEARCH_URL
        username: Username overriding OPENSEARCH_USERNAME
        verify_certs: Overrides OPENSEARCH_VERIFY_CERTS
        timeout: Overrides OPENSEARCH_TIMEOUT

    Raises:
        OpenSearchConfigError: password missing or a value is invalid
        OpenSearchAuthError: username is empty
    """
    env = os.environ if environ is None else environ

    password = env.get(PASSWORD_ENV)
    if not password:
        raise OpenSearchConfigError("password not found")

    if not endpoints:
        raw_urls = env.get(URL_ENV, DEFAULT_ENDPOINT)
        endpoints = tuple(url.strip() for url in raw_urls.split(",") if url.strip())

    if username is None:
        username = env.get(USERNAME_ENV, DEFAULT_USERNAME)

    if verify_certs is None:
        verify_certs = _parse_bool(VERIFY_CERTS_ENV, env.get(VERIFY_CERTS_ENV, "false"))

    if timeout is None:
        timeout = _parse_timeout(env.get(TIMEOUT_ENV, str(DEFAULT_TIMEOUT)))

    try:
        return ConnectionConfig(
            endpoints=tuple(endpoints),
            username=username,
            password=password,
            verify_certs=verify_certs,
            timeout=timeout
        )
    except ValueError as e:
        raise OpenSearchConfigError(f"Invalid configuration: {e}")
