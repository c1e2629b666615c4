from typing import Any, Callable, Coroutine, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import AuthenticationError, CustomBaseError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _error_response(
    status_code: int, detail: Any, headers: Optional[dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'detail': detail}, headers=headers)


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, CustomBaseError):
        return await general_500_exception_handler(request, exc)

    # Bearer challenge for clients that retry with credentials
    headers = {'WWW-Authenticate': 'Bearer'} if isinstance(exc, AuthenticationError) else None
    return _error_response(exc.status_code, exc.message, headers)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return _error_response(status.HTTP_400_BAD_REQUEST, errors)


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.error(f'💥 Unhandled {type(exc).__name__} on {request.method} {request.url.path}')
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error')


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
