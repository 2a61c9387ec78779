"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from casework import __version__
from casework.web.exceptions import register_exception_handlers
from casework.web.routers import (
    cut_list_router,
    derive_router,
    materials_router,
    validate_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Casework API",
        description="REST API for deriving cut lists and estimates from cabinet projects",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(cut_list_router, prefix="/api/v1")
    app.include_router(materials_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")
    app.include_router(derive_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
