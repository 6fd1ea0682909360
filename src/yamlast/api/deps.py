"""Dependency injection for FastAPI: application settings."""

from __future__ import annotations

from starlette.requests import Request

from yamlast.settings import Settings


def get_settings(request: Request) -> Settings:
    """FastAPI ``Depends`` provider for the app's :class:`Settings`."""
    return request.app.state.settings
