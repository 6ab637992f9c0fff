"""Services"""

from resume_studio.services.editing import (
    Section,
    add_entry,
    add_line,
    remove_entry,
    remove_line,
    update_entry,
    update_line,
    update_profile,
    update_settings,
)
from resume_studio.services.enhancement import EnhancementGateway, TextEnhancer
from resume_studio.services.preview_scale import FitController, compute_scale
from resume_studio.services.storage import PersistenceGateway, SqlPersistenceGateway
from resume_studio.services.session import EditingSession

__all__ = [
    "EditingSession",
    "EnhancementGateway",
    "FitController",
    "PersistenceGateway",
    "Section",
    "SqlPersistenceGateway",
    "TextEnhancer",
    "add_entry",
    "add_line",
    "compute_scale",
    "remove_entry",
    "remove_line",
    "update_entry",
    "update_line",
    "update_profile",
    "update_settings",
]
