from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger

ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _detail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'detail': message})


def describe_validation_errors(errors: Any) -> str:
    """'body.trainName: Field required; body.age: ...' from pydantic error dicts"""
    parts = []
    for err in errors:
        location = '.'.join(str(part) for part in err.get('loc', ()))
        message = err.get('msg', 'Invalid value')
        parts.append(f'{location}: {message}' if location else message)
    return '; '.join(parts) or 'Invalid request'


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, CustomBaseError):
        exc = CustomBaseError(str(exc))
    return _detail(exc.status_code, exc.message)


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # attrs validators on domain objects raise plain ValueError
    return _detail(status.HTTP_400_BAD_REQUEST, str(exc))


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return _detail(status.HTTP_400_BAD_REQUEST, describe_validation_errors(errors))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.exception(f'💥 [HTTP] {request.method} {request.url.path} failed: {exc}')
    return _detail(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error')


EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: unhandled_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
