"""API routers for the REST API."""

from casework.web.routers.cut_list import router as cut_list_router
from casework.web.routers.derive import router as derive_router
from casework.web.routers.materials import router as materials_router
from casework.web.routers.validate import router as validate_router

__all__ = [
    "cut_list_router",
    "derive_router",
    "materials_router",
    "validate_router",
]
