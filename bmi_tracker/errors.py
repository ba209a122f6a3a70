"""
Error types and their HTTP mapping
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class StoreError(Exception):
    """A statement failed in the relational store; str() is the driver's error text."""


def register_exception_handlers(app: FastAPI) -> None:
    """Answer every failure with a plain-text body, as the clients expect."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return PlainTextResponse(message, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return PlainTextResponse(str(exc), status_code=500)
