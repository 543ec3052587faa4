"""
API response models
Pydantic response schemas
"""
from typing import Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Uniform error envelope (always sent with HTTP 200)"""
    error: str = Field(..., description="Error message")


class StatusResponse(BaseModel):
    """Health check response"""
    status: str = Field("running", description="Service state")
    workbook: Optional[str] = Field(None, description="Workbook file in use")
