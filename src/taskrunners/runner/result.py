"""SettledResult - outcome record of a single task in a full run."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import Enum


class SettledStatus(str, Enum):
    """Settled task status."""

    FULFILLED = "fulfilled"
    REJECTED = "rejected"


@dataclass(frozen=True)
class SettledResult:
    """Outcome of one task, in the order the task was run.

    A fulfilled record carries the task's value, a rejected record carries
    the failure reason (the error message, or the raw error if it has none).
    """

    status: SettledStatus
    value: Optional[Any] = None
    reason: Optional[Any] = None

    @classmethod
    def fulfilled(cls, value: Any) -> SettledResult:
        return cls(status=SettledStatus.FULFILLED, value=value)

    @classmethod
    def rejected(cls, reason: Any) -> SettledResult:
        return cls(status=SettledStatus.REJECTED, reason=reason)

    @property
    def is_fulfilled(self) -> bool:
        return self.status == SettledStatus.FULFILLED

    @property
    def is_rejected(self) -> bool:
        return self.status == SettledStatus.REJECTED

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form, e.g. {"status": "fulfilled", "value": 1}."""
        if self.is_fulfilled:
            return {"status": self.status.value, "value": self.value}
        return {"status": self.status.value, "reason": self.reason}

    def __str__(self) -> str:
        if self.is_fulfilled:
            return f"SettledResult(status=fulfilled, value={self.value!r})"
        return f"SettledResult(status=rejected, reason={self.reason!r})"
