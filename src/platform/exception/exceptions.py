from typing import Optional


class CustomBaseError(Exception):
    """
    Error with an HTTP status attached

    @Logger.io logs these at ERROR without a traceback; the exception handlers
    turn them into {"detail": message} responses.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    """Input or state that breaks a business rule"""

    status_code = 400


class NotFoundError(CustomBaseError):
    status_code = 404


class ConflictError(CustomBaseError):
    status_code = 409


class AuthenticationError(CustomBaseError):
    status_code = 401


class LoginError(AuthenticationError):
    pass
