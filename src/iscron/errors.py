"""Exception types for iscron.

Invalid cron *values* never raise: the predicates return False. These
exceptions are reserved for misconfiguration by the caller.
"""

from __future__ import annotations

from typing import Any


class IsCronError(Exception):
    """Base exception for iscron.

    Attributes:
        message: Error message
        details: Additional error details
        hint: Helpful hint for resolution
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


class CronOptionsError(IsCronError, ValueError):
    """Raised when validation options are malformed."""

    def __init__(self, message: str, key: str | None = None, hint: str | None = None) -> None:
        super().__init__(
            message,
            details={"key": key} if key else None,
            hint=hint or "Valid options are 'seconds' and 'alias', both booleans.",
        )
        self.key = key
