"""Result type for the configuration validation pass.

This module provides an immutable ``Result[T]`` used where callers want
configuration problems reported as values instead of raised exceptions,
so a host can stop before it starts rewriting any file.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ResultStatus(Enum):
    """Enumerates possible statuses for a ``Result``."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Immutable outcome of a validation or loading step.

    Use the ``success``, ``failure`` and ``warning`` constructors rather
    than building instances directly.
    """

    status: ResultStatus
    data: T | None = None
    error: Exception | None = None
    warnings: list[str] | None = None
    metadata: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.status == ResultStatus.SUCCESS and self.error is not None:
            raise ValueError("Success results cannot have errors")
        if self.status == ResultStatus.ERROR and self.data is not None:
            raise ValueError("Error results cannot have data")
        if self.warnings is None:
            object.__setattr__(self, "warnings", [])
        if self.metadata is None:
            object.__setattr__(self, "metadata", {})

    @classmethod
    def success(cls, data: T, metadata: dict[str, Any] | None = None) -> "Result[T]":
        """Create a successful result.

        Args:
            data: Successful value.
            metadata: Optional metadata mapping.

        Returns:
            ``Result`` with ``status==SUCCESS``.
        """
        return cls(status=ResultStatus.SUCCESS, data=data, error=None, metadata=metadata or {})

    @classmethod
    def failure(cls, error: Exception, metadata: dict[str, Any] | None = None) -> "Result[T]":
        """Create an error result.

        Args:
            error: Exception instance describing the failure.
            metadata: Optional metadata mapping.

        Returns:
            ``Result`` with ``status==ERROR``.
        """
        return cls(status=ResultStatus.ERROR, error=error, metadata=metadata or {})

    @classmethod
    def warning(cls, data: T, warnings: list[str], metadata: dict[str, Any] | None = None) -> "Result[T]":
        """Create a result that succeeded with warnings."""
        return cls(status=ResultStatus.WARNING, data=data, warnings=warnings, metadata=metadata or {})

    def is_success(self) -> bool:
        """Return True when the result is a success."""
        return self.status == ResultStatus.SUCCESS

    def is_error(self) -> bool:
        """Check if result is an error."""
        return self.status == ResultStatus.ERROR

    def is_warning(self) -> bool:
        """Check if result has warnings."""
        return self.status == ResultStatus.WARNING

    def unwrap(self) -> T:
        """Return data if the result is not an error, otherwise raise its error.

        Raises:
            Exception: The stored error when the result represents a failure.
        """
        if self.is_error():
            raise self.error or RuntimeError("Result contains error")
        if self.data is None:
            raise RuntimeError("Result contains no data")
        return self.data
