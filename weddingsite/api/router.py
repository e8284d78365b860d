"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from weddingsite.api.routes import auth, users, events, statuses

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(events.router)
api_router.include_router(statuses.router)
