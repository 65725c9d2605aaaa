"""Custom exception classes"""
from typing import Any, Optional


class AppException(Exception):
    """Base exception for application errors"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str = "AppError",
        details: Optional[Any] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Validation error exception"""

    def __init__(
        self,
        message: str,
        details: Optional[Any] = None,
        error_type: str = "ValidationError"
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_type=error_type,
            details=details
        )


class NotFoundError(AppException):
    """Resource not found exception"""

    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[Any] = None,
        error_type: str = "NotFoundError"
    ):
        super().__init__(
            message=message,
            status_code=404,
            error_type=error_type,
            details=details
        )


class InvalidSplitError(ValidationError):
    """
    Splits of an expense do not satisfy their strategy's rules.

    Carries the split type together with the expected and actual sums so the
    caller can see what went wrong. ``expected``/``actual`` are None for
    degenerate input such as an empty split list.
    """

    def __init__(
        self,
        message: str,
        split_type: Optional[str] = None,
        expected: Optional[float] = None,
        actual: Optional[float] = None
    ):
        self.split_type = split_type
        self.expected = expected
        self.actual = actual
        super().__init__(
            message=message,
            details={"split_type": split_type, "expected": expected, "actual": actual},
            error_type="InvalidSplitError"
        )


class UnknownParticipantError(NotFoundError):
    """Participant id is not present in the registry"""

    def __init__(self, participant_id: str):
        self.participant_id = participant_id
        super().__init__(
            message=f"Participant with ID {participant_id} not found",
            details={"participant_id": participant_id},
            error_type="UnknownParticipantError"
        )
