# Repositories module
from app.repositories.user_repository import UserRepository
from app.repositories.diary_repository import DiaryRepository

__all__ = ["UserRepository", "DiaryRepository"]
