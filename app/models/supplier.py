"""
Supplier models - rows of the Suppliers and PurchaseOrders sheets
"""
from pydantic import Field, field_validator

from app.models.base import Cell, SheetRecord
from app.utils.parsing import is_blank


class Supplier(SheetRecord):
    """Supplier contact card"""
    table_name = "Suppliers"

    id: str = Field("", alias="ID")
    name: Cell = Field(None, alias="Name")
    contact: Cell = Field(None, alias="Contact")
    email: Cell = Field(None, alias="Email")
    address: Cell = Field(None, alias="Address")

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value):
        return "" if is_blank(value) else str(value)

    def __repr__(self):
        return f"<Supplier {self.name}>"


class PurchaseOrder(SheetRecord):
    """
    Purchase order header.

    The sheet is provisioned with the rest of the workbook but nothing reads
    or writes it yet.
    """
    table_name = "PurchaseOrders"

    id: str = Field("", alias="ID")
    date: Cell = Field(None, alias="Date")
    supplier_id: Cell = Field(None, alias="SupplierID")
    items: Cell = Field(None, alias="Items")
    status: Cell = Field(None, alias="Status")
    total_amount: Cell = Field(None, alias="TotalAmount")
