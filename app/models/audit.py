"""
Audit log model
"""
from pydantic import Field

from app.models.base import Cell, SheetRecord


class AuditLogEntry(SheetRecord):
    """Append-only record of one mutating action"""
    table_name = "AuditLogs"

    timestamp: Cell = Field(None, alias="Timestamp")
    user: Cell = Field(None, alias="User")
    action: Cell = Field(None, alias="Action")
    details: Cell = Field(None, alias="Details")

    def __repr__(self):
        return f"<AuditLogEntry {self.action} by {self.user}>"
