"""API routes"""

from fastapi import APIRouter
from .games import router as games_router
from .recommendations import router as recommendations_router

api_router = APIRouter()

api_router.include_router(games_router, prefix="/games", tags=["games"])
api_router.include_router(recommendations_router, prefix="/recommendations", tags=["recommendations"])
