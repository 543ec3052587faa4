"""
FastAPI dependencies for caller identity
"""
from typing import Optional
from fastapi import Header

from app.database.config import DEFAULT_USER


def get_current_actor(
    x_user_email: Optional[str] = Header(None),
) -> str:
    """
    Identity recorded on transactions and audit entries

    Args:
        x_user_email: value of the X-User-Email request header

    Returns:
        The header value, or the configured default user when it is absent
    """
    if x_user_email and x_user_email.strip():
        return x_user_email.strip()
    return DEFAULT_USER
