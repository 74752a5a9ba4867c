class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class VenueConfigError(DomainError):
    """Raised when a venue or seat engine is built with an unusable layout."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
