"""
Caller identity
"""
from app.auth.dependencies import get_current_actor

__all__ = ["get_current_actor"]
