"""Exceptions raised by the gardens service and its API client."""


class GardenServiceError(Exception):
    """Base exception for all gardens errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class StorageError(GardenServiceError):
    """The storage engine failed while running a repository operation."""

    def __init__(self, operation: str, message: str, details: dict | None = None):
        super().__init__(message, details)
        self.operation = operation


class ApiError(GardenServiceError):
    """A gardens API call returned a non-success HTTP status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code
