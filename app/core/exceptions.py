"""
Inventory exceptions

Every error raised by the row store or the domain operations derives from
InventoryError. The dispatcher renders the message into the {"error": ...}
envelope, so messages are written for the end user.
"""


class InventoryError(Exception):
    """Base exception for all inventory errors."""

    code: str = "INVENTORY_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ItemNotFoundError(InventoryError):
    """No inventory row carries the requested identifier."""

    code = "ITEM_NOT_FOUND"

    def __init__(self, item_id: str | None = None):
        self.item_id = item_id
        super().__init__("Item not found")


class ValidationError(InventoryError):
    """A payload value could not be used (e.g. a non-numeric amount)."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class UnknownTableError(InventoryError):
    """The row store was asked for a table it has no header row for."""

    code = "UNKNOWN_TABLE"

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"Unknown table: {table}")
