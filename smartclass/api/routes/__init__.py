"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from smartclass.api.routes.auth_routes import router as auth_router
from smartclass.api.routes.collection_routes import (
    faculty_router, grade_router, classroom_router, lab_router,
    subject_router, leave_router, feedback_router
)
from smartclass.api.routes.schedule_routes import router as schedule_router
from smartclass.api.routes.swap_routes import router as swap_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(faculty_router)
api_router.include_router(grade_router)
api_router.include_router(classroom_router)
api_router.include_router(lab_router)
api_router.include_router(subject_router)
api_router.include_router(schedule_router)
api_router.include_router(swap_router)
api_router.include_router(leave_router)
api_router.include_router(feedback_router)
