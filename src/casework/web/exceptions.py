"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from casework.application.config import ConfigError


class CabinetNotFoundError(Exception):
    """Raised when a request names a cabinet the project does not contain."""

    def __init__(self, cabinet_id: str) -> None:
        self.cabinet_id = cabinet_id
        super().__init__(f"Cabinet not found: {cabinet_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(CabinetNotFoundError)
    async def cabinet_not_found_handler(
        request: Request, exc: CabinetNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"cabinet_id": exc.cabinet_id},
            },
        )
