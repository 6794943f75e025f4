"""API routes for the FastAPI application."""

from fastapi import APIRouter

from elitescope.api.v1.endpoints import (
    auth,
    decisions,
    education,
    elites,
    events,
    expert_access,
    health,
    newsletter,
    organizations,
    posts,
    publications,
    reports,
    stats,
)

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(elites.router, prefix="/elites", tags=["elites"])
api_router.include_router(organizations.router, prefix="/organizations", tags=["organizations"])
api_router.include_router(decisions.router, prefix="/decisions", tags=["decisions"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(education.router, prefix="/education", tags=["education"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(publications.router, prefix="/publications", tags=["publications"])
api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
api_router.include_router(newsletter.router, prefix="/newsletter", tags=["newsletter"])
api_router.include_router(expert_access.router, prefix="/expert-access", tags=["expert-access"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
