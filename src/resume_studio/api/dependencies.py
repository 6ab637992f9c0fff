"""Shared dependencies for API routes.

Resources are created by :func:`resume_studio.api.main.create_app` and kept
on ``app.state``.
"""

from __future__ import annotations

from fastapi import Request

from resume_studio.services.enhancement import EnhancementBackend
from resume_studio.services.storage import SqlPersistenceGateway


def get_gateway(request: Request) -> SqlPersistenceGateway:
    return request.app.state.gateway


def get_enhancer(request: Request) -> EnhancementBackend:
    return request.app.state.enhancer
