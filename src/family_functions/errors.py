from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid-argument"
    LOOKUP_FAILURE = "lookup-failure"
    TRANSACTION_FAILURE = "transaction-failure"
    CLAIM_WRITE_FAILURE = "claim-write-failure"


@dataclass
class Result:
    """
    Outcome of one function invocation.

    Operations never raise to the platform; they return one of these and the
    handler decides what goes back to the caller and what goes to the log.
    """

    success: bool
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, **details: Any) -> "Result":
        return cls(success=True, details=details)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, **details: Any) -> "Result":
        return cls(success=False, error=message, kind=kind, details=details)

    def to_dict(self) -> Dict[str, Any]:
        # Wire shape for callable responses: {success, error?}
        if self.success:
            return {"success": True}
        return {"success": False, "error": self.error}
