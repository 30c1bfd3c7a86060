"""API router composition for the UMS FastAPI application."""

from __future__ import annotations

from fastapi import APIRouter

from .features.health.router import router as health_router
from .features.me.router import router as me_router
from .features.rbac.router import router as rbac_router
from .features.users.router import router as users_router

api_router = APIRouter(prefix="/v1")
api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(users_router)
api_router.include_router(rbac_router)
api_router.include_router(me_router)

__all__ = ["api_router"]
