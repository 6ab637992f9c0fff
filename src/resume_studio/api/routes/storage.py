"""Account and version storage endpoint.

A single ``POST /api`` dispatches on the ``action`` field.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from resume_studio.api.dependencies import get_gateway
from resume_studio.api.schemas.storage import StorageAction, StorageRequest
from resume_studio.models.document import ResumeDocument
from resume_studio.services.storage import SqlPersistenceGateway

logger = logging.getLogger(__name__)

router = APIRouter(tags=["storage"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@router.post("")
def handle_storage_action(
    request: StorageRequest,
    gateway: Annotated[SqlPersistenceGateway, Depends(get_gateway)],
) -> Any:
    """Dispatch a storage action and answer ``{success, data?, message?}``."""
    try:
        action = StorageAction(request.action)
    except ValueError:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid action")

    if action is StorageAction.REGISTER:
        if gateway.user_exists(request.username):
            return _error(status.HTTP_400_BAD_REQUEST, "User exists")
        if not gateway.register(request.username, request.password):
            return _error(status.HTTP_400_BAD_REQUEST, gateway.last_error or "Registration failed")
        return {"success": True}

    if action is StorageAction.LOGIN:
        return {"success": gateway.login(request.username, request.password)}

    if action is StorageAction.GET_VERSIONS:
        versions = gateway.list_versions(request.username)
        return {"success": True, "data": [version.to_wire() for version in versions]}

    if action is StorageAction.DELETE_VERSION:
        return {"success": gateway.delete_version(request.username, request.version_id or "")}

    # Remaining actions carry a document.
    try:
        document = ResumeDocument.from_wire(request.data or {})
    except ValidationError as exc:
        logger.info("Rejected invalid document: %s", exc)
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid document")

    if action is StorageAction.SAVE_NEW_VERSION:
        version = gateway.create_version(request.username, request.name, document)
    else:
        version = gateway.update_version(
            request.username, request.version_id or "", request.name, document
        )
    if version is None:
        return {"success": False}
    return {"success": True, "data": version.to_wire()}
