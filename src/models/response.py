"""Common outcome wrapper for coordinator and representative operations."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class OperationStatus(str, Enum):
    """How an operation ended."""

    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    UNSUPPORTED = "unsupported"


class OperationResult(BaseModel):
    """Outcome of a record/assign/renew operation."""

    status: OperationStatus = OperationStatus.OK
    message: str
    data: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.OK
