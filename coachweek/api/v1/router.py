"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from coachweek.api.v1.endpoints import plans, sessions, templates, week

api_router = APIRouter()

api_router.include_router(
    week.router, prefix="/clients", tags=["Weekly view"]
)
api_router.include_router(
    sessions.router, tags=["Training sessions"]
)
api_router.include_router(
    plans.router, prefix="/clients", tags=["Workout plans"]
)
api_router.include_router(
    templates.router, prefix="/templates", tags=["Workout templates"]
)
