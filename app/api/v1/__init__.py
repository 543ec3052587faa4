"""
API v1 routes
"""
from fastapi import APIRouter
from app.api.v1 import dispatcher

api_router = APIRouter(redirect_slashes=False)

api_router.include_router(dispatcher.router, tags=["Inventory actions"])

__all__ = ["api_router"]
