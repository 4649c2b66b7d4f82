"""API router configuration.
"""

from fastapi import APIRouter

from .routes.account import router as account_router
from .routes.admin import router as admin_router
from .routes.health import router as health_router
from .routes.my import router as my_router
from .routes.password_reset import router as password_reset_router
from .routes.submissions import router as submissions_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(submissions_router, tags=["submissions"])
api_router.include_router(account_router, tags=["auth"])
api_router.include_router(password_reset_router, tags=["auth"])
api_router.include_router(my_router, tags=["my"])
api_router.include_router(admin_router, tags=["admin"])
