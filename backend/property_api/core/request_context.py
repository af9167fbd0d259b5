"""Request Context — explicit per-request unit of work passed through every layer.

Invariants:
    - request_id is stable for the whole request and attached to every log record
    - deadline is a monotonic-clock instant; None means unbounded
    - remaining() never returns a negative value

Design Decisions:
    - Passed as an explicit argument instead of a contextvar: every service and
      repository signature shows it participates in the request's deadline
    - Pure value object: the shell decides how to enforce the deadline
"""

import time
import uuid
from dataclasses import dataclass, field

from property_api.core.errors import ErrorContext, RequestTimeoutError


@dataclass(frozen=True)
class RequestContext:
    """Traceable, time-bounded unit of work for one inbound request."""
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    deadline: float | None = None

    @classmethod
    def with_timeout(
        cls, timeout_seconds: float | None, request_id: str | None = None,
    ) -> "RequestContext":
        deadline = (
            time.monotonic() + timeout_seconds
            if timeout_seconds is not None else None
        )
        if request_id:
            return cls(request_id=request_id, deadline=deadline)
        return cls(deadline=deadline)

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when unbounded."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def ensure_active(self, operation: str) -> None:
        """Raise RequestTimeoutError if the deadline has already passed."""
        if self.expired:
            raise RequestTimeoutError(operation, self.error_context(operation))

    def error_context(
        self, operation: str, property_id: int | None = None,
    ) -> ErrorContext:
        return ErrorContext(
            request_id=self.request_id,
            property_id=property_id,
            operation=operation,
        )

    def log_extra(self, **fields: object) -> dict:
        """Extra mapping for logger calls (surfaced by the JSON formatter)."""
        return {"request_id": self.request_id, **fields}
