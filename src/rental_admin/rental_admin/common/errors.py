from __future__ import annotations

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DataFetchError, DomainError, NotFoundError, ValidationError
from .http import fail


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), status=400, code="VALIDATION_ERROR")

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), status=404, code="NOT_FOUND")

    @app.errorhandler(DataFetchError)
    def _fetch(e: DataFetchError):
        app.logger.warning("data fetch failed: %s", e)
        return fail("Data is temporarily unavailable, please retry", status=503, code="DATA_UNAVAILABLE")

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return fail(str(e), status=400)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _500(e: Exception):
        app.logger.exception(e)
        return fail("Internal server error", status=500)
