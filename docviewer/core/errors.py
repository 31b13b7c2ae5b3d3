from typing import Optional


class ServiceError(Exception):
    """Base class for service errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """Raised when a file or directory is absent."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message += f": {resource_id}"
        super().__init__(message, status_code=404)


class BadRequestError(ServiceError):
    """Raised when a request is semantically invalid."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class InternalError(ServiceError):
    """Raised on unexpected I/O or encoding failures."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, status_code=500)
