# Services module
from app.services.auth_service import AuthService
from app.services.user_service import UserService
from app.services.diary_service import DiaryService
from app.services.upload_service import UploadService
from app.services.admin_service import AdminService

__all__ = ["AuthService", "UserService", "DiaryService", "UploadService", "AdminService"]
