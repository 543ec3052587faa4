"""
Workbook configuration
The spreadsheet workbook is the application's database.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from app.database.sheets import RowStore

load_dotenv()

# Get project root directory (parent of app directory)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Workbook path from environment variable
# Default: inventory.xlsx at the project root
_default_workbook = PROJECT_ROOT / "inventory.xlsx"


def resolve_workbook_path(value: str | None = None) -> Path:
    """Relative paths resolve against the project root"""
    path = Path(value or os.getenv("INVENTORY_WORKBOOK") or _default_workbook)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


WORKBOOK_PATH = resolve_workbook_path()

# Identity recorded in the audit trail when the caller sends none
DEFAULT_USER = os.getenv("DEFAULT_USER", "anonymous")

FRONTEND_DIR = Path(os.getenv("FRONTEND_DIR") or PROJECT_ROOT / "frontend")


def get_store() -> RowStore:
    """
    Dependency function to get the row store
    Usage in FastAPI endpoints:
        @router.get("/endpoint")
        def endpoint(store: RowStore = Depends(get_store)):
            ...
    """
    return RowStore(WORKBOOK_PATH)
