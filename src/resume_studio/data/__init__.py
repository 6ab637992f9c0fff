from resume_studio.data.db import Base, Database, get_database_url

__all__ = ["Base", "Database", "get_database_url"]
