from typing import List, Optional
from ..schemas.movies_schemas import ErrorResponse


class MovieHubError(Exception):
    """Base error rendered to the client as an ErrorResponse."""

    status_code = 500

    def __init__(self, message: str, details: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict:
        return ErrorResponse(
            error=self.message, details=self.details
        ).model_dump(exclude_none=True)


class ClientInputError(MovieHubError):
    status_code = 400


class UnsupportedMediaTypeError(ClientInputError):
    status_code = 415


class MovieValidationError(MovieHubError):
    status_code = 422

    def __init__(self, violations: List[str]):
        super().__init__('validation failed', details=violations)


class NotFoundError(MovieHubError):
    status_code = 404


class UnsupportedOperationError(MovieHubError):
    status_code = 405
