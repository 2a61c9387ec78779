"""FastAPI REST API for cabinet projects.

This module provides a REST API that derives cut lists, material estimates,
design advisories and smart defaults from JSON project snapshots.

Usage:
    uvicorn casework.web:app --reload
"""

from casework.web.app import app, create_app

__all__ = ["app", "create_app"]
