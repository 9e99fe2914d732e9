"""Operation result dataclass.

Uniform result type returned from operations across the application,
including status, data, and error information.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message, safe to show to the caller
        data: Optional[Any] -- optional payload (can be dict, list, or object)
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            data=data,
        )

    @classmethod
    def invalid_input(
        cls, message: str, error_code: Optional[str] = "INVALID_INPUT"
    ) -> "OperationResult":
        """Create an INVALID_INPUT result (the caller's fault, reported verbatim)."""
        return cls.error(OperationStatus.INVALID_INPUT, message, error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = "NOT_FOUND"
    ) -> "OperationResult":
        """Create a NOT_FOUND result."""
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)

    @classmethod
    def conflict(
        cls,
        message: str,
        error_code: Optional[str] = "CONFLICT",
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a CONFLICT result.

        Use when an operation would break the identity mapping invariant.
        No state may have been mutated when this is returned.
        """
        return cls.error(OperationStatus.CONFLICT, message, error_code, data)

    @classmethod
    def upstream_unavailable(
        cls, message: str, error_code: Optional[str] = "UPSTREAM_UNAVAILABLE"
    ) -> "OperationResult":
        """Create an UPSTREAM_UNAVAILABLE result.

        Use for transport failures of an external collaborator, such as:
        - Network errors and timeouts
        - Non-2xx responses from the directory or chat platform

        The message must be generic: raw transport detail stays in the logs.

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with UPSTREAM_UNAVAILABLE status
        """
        return cls.error(OperationStatus.UPSTREAM_UNAVAILABLE, message, error_code)
