"""
Workbook storage and configuration
"""
from app.database.config import WORKBOOK_PATH, DEFAULT_USER, get_store
from app.database.sheets import RowStore

__all__ = ["WORKBOOK_PATH", "DEFAULT_USER", "get_store", "RowStore"]
