"""Schemas for the account and version storage endpoint."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from resume_studio.api.schemas.common import RequestModel


class StorageAction(StrEnum):
    REGISTER = "register"
    LOGIN = "login"
    GET_VERSIONS = "getVersions"
    SAVE_NEW_VERSION = "saveNewVersion"
    UPDATE_VERSION = "updateVersion"
    DELETE_VERSION = "deleteVersion"


class StorageRequest(RequestModel):
    """Body of ``POST /api``.

    ``action`` is kept as a plain string so unknown actions reach the route
    and get the ``Invalid action`` response rather than a validation error.
    """

    action: str
    username: str = ""
    password: str = ""
    version_id: str | None = None
    name: str | None = None
    data: dict[str, Any] | None = None
