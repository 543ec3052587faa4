"""
Inventory module
Item masterlist and stock adjustments backed by the Inventory sheet
"""
from datetime import datetime
from typing import Any, Dict, List, Mapping

from app.core.exceptions import ItemNotFoundError, ValidationError
from app.database.sheets import RowStore
from app.models import InventoryItem, ItemStatus, Transaction, TransactionType
from app.models.base import new_id
from app.models.inventory import EDITABLE_ITEM_FIELDS
from app.modules.audit import log_audit
from app.utils.logger import setup_logger
from app.utils.parsing import clean_cell, is_blank, parse_number, to_int

logger = setup_logger(__name__)

INVENTORY = InventoryItem.table_name


def _display(value: Any) -> str:
    return "" if is_blank(value) else str(value)


def list_inventory(store: RowStore) -> List[Dict[str, Any]]:
    """All inventory rows in sheet order"""
    return [InventoryItem.from_row(row).to_row() for row in store.read_rows(INVENTORY)]


def default_status(qty: Any) -> ItemStatus:
    """Status for a new item that was given none"""
    number = parse_number(qty)
    if number is not None and number > 0:
        return ItemStatus.GOOD
    return ItemStatus.OUT_OF_STOCK


def add_item(store: RowStore, fields: Mapping[str, Any], actor: str) -> Dict[str, Any]:
    """
    Register a new inventory item

    Args:
        store: row store
        fields: item columns keyed by header name (Item, Qty, UnitCost, ...)
        actor: identity of the caller

    Returns:
        {"success": True, "id": <new identifier>}
    """
    values = {header: clean_cell(fields.get(header), header) for header in EDITABLE_ITEM_FIELDS}
    if is_blank(values.get("Status")):
        values["Status"] = default_status(values.get("Qty")).value

    item = InventoryItem.from_row({**values, "ID": new_id(), "LastUpdated": datetime.now()})
    store.append_row(INVENTORY, item.to_row())

    logger.info(f"Item added: {item.item} (qty: {item.qty}, status: {item.status})")
    log_audit(
        store,
        "Add Item",
        f"Added item: {_display(item.item)} (Serial: {_display(item.serial)})",
        actor,
    )
    return {"success": True, "id": item.id}


def edit_item(store: RowStore, item_id: str, fields: Mapping[str, Any], actor: str) -> Dict[str, Any]:
    """
    Update the descriptive columns of an item

    Only the columns present in ``fields`` change. ID is never rewritten and
    LastUpdated is stamped on every edit. Without an explicit Status, setting
    Qty to zero or below marks the item Out of Stock, and raising Qty above
    zero on an Out of Stock item resets it to Good, as adjust_stock does.

    Raises:
        ItemNotFoundError: no row carries ``item_id``
    """
    found = store.lookup(INVENTORY, item_id)
    if found is None:
        raise ItemNotFoundError(item_id)
    position, row = found

    changes = {header: clean_cell(fields[header], header) for header in EDITABLE_ITEM_FIELDS if header in fields}
    if "Qty" in changes and "Status" not in changes:
        number = parse_number(changes["Qty"])
        if number is not None and number <= 0:
            changes["Status"] = ItemStatus.OUT_OF_STOCK.value
        elif number is not None and row.get("Status") == ItemStatus.OUT_OF_STOCK.value:
            changes["Status"] = ItemStatus.GOOD.value
    changes["LastUpdated"] = datetime.now()

    # validate the merged row before touching the sheet
    InventoryItem.from_row({**row, **changes})
    store.update_row(INVENTORY, position, changes)

    logger.info(f"Item edited: {item_id} ({', '.join(sorted(changes))})")
    log_audit(store, "Edit Item", f"Edited item ID: {item_id}", actor)
    return {"success": True}


def delete_item(store: RowStore, item_id: str, actor: str) -> Dict[str, Any]:
    """
    Remove an item row

    Raises:
        ItemNotFoundError: no row carries ``item_id``
    """
    found = store.lookup(INVENTORY, item_id)
    if found is None:
        raise ItemNotFoundError(item_id)
    position, row = found

    store.delete_row(INVENTORY, position)

    logger.info(f"Item deleted: {item_id} ({_display(row.get('Item'))})")
    log_audit(store, "Delete Item", f"Deleted item ID: {item_id}", actor)
    return {"success": True}


def adjust_stock(store: RowStore, item_id: str, amount: Any, reason: Any, actor: str) -> Dict[str, Any]:
    """
    Add or remove stock and record the movement

    A positive amount is a Stock In, anything else a Stock Out. The quantity
    may go negative. Reaching zero or below marks the item Out of Stock;
    rising above zero from Out of Stock resets it to Good.

    Args:
        store: row store
        item_id: inventory row identifier
        amount: signed whole-number change (number or numeric text)
        reason: free-text note stored on the transaction
        actor: identity of the caller

    Returns:
        {"success": True, "newQty": <quantity after the change>}

    Raises:
        ValidationError: amount is not a whole number, or reason holds illegal characters
        ItemNotFoundError: no row carries ``item_id``
    """
    number = parse_number(amount)
    if number is None:
        raise ValidationError("Invalid amount", field="amount")
    if not number.is_integer():
        raise ValidationError("Amount must be a whole number", field="amount")
    delta = int(number)
    notes = clean_cell(reason, "reason")

    found = store.lookup(INVENTORY, item_id)
    if found is None:
        raise ItemNotFoundError(item_id)
    position, row = found
    item = InventoryItem.from_row(row)

    current_qty = to_int(item.qty, 0)
    new_qty = current_qty + delta
    now = datetime.now()

    changes: Dict[str, Any] = {"Qty": new_qty, "LastUpdated": now}
    if new_qty <= 0:
        changes["Status"] = ItemStatus.OUT_OF_STOCK.value
    elif item.status == ItemStatus.OUT_OF_STOCK.value:
        changes["Status"] = ItemStatus.GOOD.value
    store.update_row(INVENTORY, position, changes)

    transaction = Transaction(
        id=new_id(),
        date=now,
        type=(TransactionType.STOCK_IN if delta > 0 else TransactionType.STOCK_OUT).value,
        item_id=item.id,
        item_name=item.item,
        quantity=abs(delta),
        user=actor,
        notes=notes,
    )
    store.append_row(Transaction.table_name, transaction.to_row())

    logger.info(f"Stock {transaction.type}: {_display(item.item)} {current_qty} -> {new_qty}")
    log_audit(
        store,
        "Adjust Stock",
        f"Adjusted stock for {_display(item.item)} by {delta}. Reason: {_display(reason)}",
        actor,
    )
    return {"success": True, "newQty": new_qty}
