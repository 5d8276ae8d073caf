# Database models
from app.models.base import Base
from app.models.user import User
from app.models.diary_entry import DiaryEntry

__all__ = ["Base", "User", "DiaryEntry"]
