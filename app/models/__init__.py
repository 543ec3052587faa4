"""
Sheet record models
"""
from app.models.inventory import InventoryItem, Transaction, ItemStatus, TransactionType
from app.models.supplier import Supplier, PurchaseOrder
from app.models.audit import AuditLogEntry

# Every table the workbook knows about, in provisioning order
RECORD_TYPES = [InventoryItem, Transaction, Supplier, PurchaseOrder, AuditLogEntry]

TABLE_HEADERS = {record.table_name: record.headers() for record in RECORD_TYPES}

__all__ = [
    "InventoryItem",
    "Transaction",
    "ItemStatus",
    "TransactionType",
    "Supplier",
    "PurchaseOrder",
    "AuditLogEntry",
    "RECORD_TYPES",
    "TABLE_HEADERS",
]
