"""Exception types raised by the job board client."""


class JobBoardError(Exception):
    """Base class for job board client errors."""


class RequestError(JobBoardError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotAuthenticatedError(RequestError):
    """Raised when an authenticated call is attempted without a token."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message, status_code=None)
