"""
Supplier module
"""
from typing import Any, Dict, List, Mapping

from app.database.sheets import RowStore
from app.models import Supplier
from app.models.base import new_id
from app.modules.audit import log_audit
from app.utils.logger import setup_logger
from app.utils.parsing import clean_cell

logger = setup_logger(__name__)

SUPPLIER_FIELDS = ["name", "contact", "email", "address"]


def list_suppliers(store: RowStore) -> List[Dict[str, Any]]:
    """All suppliers in sheet order"""
    return [Supplier.from_row(row).to_row() for row in store.read_rows(Supplier.table_name)]


def add_supplier(store: RowStore, fields: Mapping[str, Any], actor: str) -> Dict[str, Any]:
    """
    Register a supplier

    Args:
        store: row store
        fields: {"name", "contact", "email", "address"} (header-cased keys are accepted too)
        actor: identity of the caller

    Returns:
        {"success": True, "id": <new identifier>}
    """
    values = {}
    for field in SUPPLIER_FIELDS:
        value = fields.get(field, fields.get(field.capitalize()))
        values[field] = clean_cell(value, field)

    supplier = Supplier(id=new_id(), **values)
    store.append_row(Supplier.table_name, supplier.to_row())

    logger.info(f"Supplier added: {supplier.name}")
    log_audit(store, "Add Supplier", f"Added supplier: {supplier.name or ''}", actor)
    return {"success": True, "id": supplier.id}
