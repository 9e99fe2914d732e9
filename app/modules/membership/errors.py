"""Errors for the membership module."""


class InvalidPayloadError(ValueError):
    """Raised when a webhook body cannot be parsed into a membership event.

    Attributes:
        message: human-friendly message, safe to return to the caller
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# Machine error codes carried on OperationResult.error_code
INVALID_EMAIL = "INVALID_EMAIL"
MISSING_EMAIL = "MISSING_EMAIL"
ALREADY_LINKED_ELSEWHERE = "ALREADY_LINKED_ELSEWHERE"
ACCOUNT_ALREADY_LINKED = "ACCOUNT_ALREADY_LINKED"
NOT_A_MEMBER = "NOT_A_MEMBER"
DIRECTORY_UNAVAILABLE = "DIRECTORY_UNAVAILABLE"
