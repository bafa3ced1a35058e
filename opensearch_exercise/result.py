"""Outcome of a single exercise step."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


class OperationResult(BaseModel):
    """Success or Failure of one API call.

    ``body`` holds the response on success. On failure it holds whatever
    error body the cluster sent back, which may be None.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    body: Any = None
    error: Optional[str] = None
    status: Optional[int] = None

    @classmethod
    def success(cls, body: Any) -> "OperationResult":
        return cls(ok=True, body=body)

    @classmethod
    def failure(cls, error: str, status: Optional[int] = None, body: Any = None) -> "OperationResult":
        return cls(ok=False, error=error, status=status, body=body)
