"""
Audit log module
Every successful mutation leaves exactly one entry in the AuditLogs sheet.
"""
from datetime import datetime
from typing import Any, Dict, List

from app.database.sheets import RowStore
from app.models import AuditLogEntry
from app.utils.logger import setup_logger

logger = setup_logger(__name__)


def log_audit(store: RowStore, action: str, details: str, actor: str) -> AuditLogEntry:
    """
    Append an audit entry

    Args:
        store: row store
        action: action label (e.g. 'Add Item')
        details: free-text description
        actor: identity of the caller

    Returns:
        The entry that was written
    """
    entry = AuditLogEntry(
        timestamp=datetime.now(),
        user=actor,
        action=action,
        details=details,
    )
    store.append_row(AuditLogEntry.table_name, entry.to_row())
    logger.info(f"[audit] {action} by {actor}: {details}")
    return entry


def list_audit_logs(store: RowStore) -> List[Dict[str, Any]]:
    """All audit entries, oldest first"""
    return [AuditLogEntry.from_row(row).to_row() for row in store.read_rows(AuditLogEntry.table_name)]
