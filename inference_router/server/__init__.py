"""HTTP surface: app factory, API key guard and server runner."""

from .run import run_server
from .app import create_app, build_openapi_schema

__all__ = ["build_openapi_schema", "create_app", "run_server"]
