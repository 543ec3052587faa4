"""
Sheet Inventory main application
FastAPI web server
"""
import os

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from app.api.v1 import api_router
from app.database.config import FRONTEND_DIR, WORKBOOK_PATH
from app.utils.logger import setup_logger
from app.utils.response_models import StatusResponse

logger = setup_logger(__name__)

app = FastAPI(title="Sheet Inventory")

# CORS for a separately hosted front end
allowed_origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

# Static files (front end)
if FRONTEND_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR, html=True), name="static")
else:
    logger.warning(f"Front end directory not found: {FRONTEND_DIR}")


@app.get("/")
def read_root():
    """Redirect the root path to the dashboard"""
    return RedirectResponse(url="/static/index.html")


@app.get("/api/status", response_model=StatusResponse)
def api_status():
    """Health check"""
    return StatusResponse(status="running", workbook=str(WORKBOOK_PATH))


if __name__ == "__main__":
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
