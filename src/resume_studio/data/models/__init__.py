from resume_studio.data.models.user import User
from resume_studio.data.models.version import ResumeVersionRecord

__all__ = ["ResumeVersionRecord", "User"]
