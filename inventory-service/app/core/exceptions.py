"""Application exceptions, translated to HTTP responses in app.main."""


class BaseAppException(Exception):
    """Base exception class for all application exceptions."""

    status_code = 500

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(BaseAppException):
    """Raised when a referenced product does not exist."""
    status_code = 404


class InvalidPayloadError(BaseAppException):
    """Raised when a payload is malformed or violates a constraint."""
    status_code = 400


class StorageError(BaseAppException):
    """Raised when the storage backend fails."""
    pass
