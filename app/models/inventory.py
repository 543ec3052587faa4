"""
Inventory models - rows of the Inventory and Transactions sheets
"""
import enum
from typing import Optional

from pydantic import Field, field_validator

from app.models.base import Cell, SheetRecord
from app.utils.parsing import is_blank, parse_number


class ItemStatus(str, enum.Enum):
    """Condition of an inventory item"""
    GOOD = "Good"
    DAMAGED = "Damaged"
    FOR_REPAIR = "For Repair"
    LOST = "Lost"
    OUT_OF_STOCK = "Out of Stock"


class TransactionType(str, enum.Enum):
    STOCK_IN = "Stock In"
    STOCK_OUT = "Stock Out"


def _coerce_id(value):
    if is_blank(value):
        return ""
    return str(value)


class InventoryItem(SheetRecord):
    """Inventory item (one row of the Inventory sheet)"""
    table_name = "Inventory"

    id: str = Field("", alias="ID")
    project: Cell = Field(None, alias="Project")
    category: Cell = Field(None, alias="Category")
    item: Cell = Field(None, alias="Item")
    brand_model: Cell = Field(None, alias="BrandModel")
    serial: Cell = Field(None, alias="Serial")
    qty: Cell = Field(None, alias="Qty")
    unit: Cell = Field(None, alias="Unit")
    unit_cost: Cell = Field(None, alias="UnitCost")
    date_acquired: Cell = Field(None, alias="DateAcquired")
    procurement_project: Cell = Field(None, alias="ProcurementProject")
    person_in_charge: Cell = Field(None, alias="PersonInCharge")
    location: Cell = Field(None, alias="Location")
    status: Cell = Field(None, alias="Status")
    remarks: Cell = Field(None, alias="Remarks")
    last_updated: Cell = Field(None, alias="LastUpdated")

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value):
        return _coerce_id(value)

    @property
    def stock_level(self) -> Optional[float]:
        """
        Quantity for stock counting: a blank cell counts as zero,
        text that is not a number counts as nothing.
        """
        if is_blank(self.qty):
            return 0.0
        return parse_number(self.qty)

    def __repr__(self):
        return f"<InventoryItem {self.item}: {self.qty}>"


# Descriptive columns a caller may set on add/edit (ID and LastUpdated are system-managed)
EDITABLE_ITEM_FIELDS = [
    header for header in InventoryItem.headers() if header not in ("ID", "LastUpdated")
]


class Transaction(SheetRecord):
    """Stock movement log (one row of the Transactions sheet)"""
    table_name = "Transactions"

    id: str = Field("", alias="ID")
    date: Cell = Field(None, alias="Date")
    type: Cell = Field(None, alias="Type")
    item_id: Cell = Field(None, alias="ItemID")
    item_name: Cell = Field(None, alias="ItemName")
    quantity: Cell = Field(None, alias="Quantity")
    user: Cell = Field(None, alias="User")
    notes: Cell = Field(None, alias="Notes")

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value):
        return _coerce_id(value)

    def __repr__(self):
        return f"<Transaction {self.id}: {self.type} {self.quantity}>"
