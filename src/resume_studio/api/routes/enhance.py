"""Text enhancement endpoint."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from resume_studio.api.dependencies import get_enhancer
from resume_studio.api.schemas.enhance import EnhanceAction, EnhanceRequest
from resume_studio.services.enhancement import EnhancementBackend

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gemini", tags=["enhancement"])


@router.post("")
def handle_enhance_action(
    request: EnhanceRequest,
    enhancer: Annotated[EnhancementBackend, Depends(get_enhancer)],
) -> Any:
    """Improve a text snippet or generate a bullet point."""
    try:
        action = EnhanceAction(request.action)
    except ValueError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Invalid action"}
        )

    try:
        if action is EnhanceAction.IMPROVE_TEXT:
            data = enhancer.improve(request.text, request.context)
        else:
            data = enhancer.generate(request.topic)
    except Exception:
        logger.exception("Enhancement backend failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Internal Server Error"},
        )
    return {"success": True, "data": data}
