class CustomBaseError(Exception):
    """
    Error that knows its HTTP status.

    @Logger.io logs these at ERROR without a traceback; the global handler
    renders them as {"detail": message}.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class NotFoundError(CustomBaseError):
    status_code = 404


class ConflictError(CustomBaseError):
    status_code = 409


class AuthenticationError(CustomBaseError):
    status_code = 401
