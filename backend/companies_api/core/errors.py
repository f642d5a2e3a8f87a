# backend/companies_api/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CompanyError(Exception):
    """Base class for registry failures that map onto an HTTP status."""

    status_code = 500
    message = "Internal server error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidPayload(CompanyError):
    status_code = 400
    message = "Invalid request payload."


class CompanyNotFound(CompanyError):
    status_code = 404
    message = "Company not found."

    def __init__(self, company_id=None):
        super().__init__()
        self.company_id = company_id


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CompanyError)
    async def _company_error(request: Request, exc: CompanyError):
        return error_response(exc.status_code, exc.message)

    # Malformed bodies (not an object, non-string fields) are the same
    # client error as a missing field: 400, never FastAPI's default 422.
    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        logger.debug("[companies] rejected payload on %s: %s", request.url.path, exc.errors())
        return error_response(InvalidPayload.status_code, InvalidPayload.message)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.exception("[app] unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal server error.")
