# API Routes
from app.api.routes.auth import router as auth_router
from app.api.routes.user import router as user_router
from app.api.routes.diary import router as diary_router
from app.api.routes.upload import router as upload_router
from app.api.routes.admin import router as admin_router

__all__ = [
    "auth_router",
    "user_router",
    "diary_router",
    "upload_router",
    "admin_router",
]
