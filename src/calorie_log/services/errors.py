"""Errors raised by the entry service."""


class EntryError(Exception):
    """Base error carrying a short message and a suggested HTTP status."""

    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class EntryValidationError(EntryError):
    """Raised when a required field is missing or malformed."""

    http_status = 400


class EntryStorageError(EntryError):
    """Raised when the entry store fails or the target entry does not exist."""

    http_status = 500
