"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from jobhunter.api.routes.auth_routes import router as auth_router
from jobhunter.api.routes.admin_routes import router as admin_router
from jobhunter.api.routes.profile_routes import router as profile_router
from jobhunter.api.routes.skill_routes import router as skill_router

api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(admin_router)
api_router.include_router(profile_router)
api_router.include_router(skill_router)
