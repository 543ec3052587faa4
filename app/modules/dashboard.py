"""
Dashboard module
Summary figures computed from the Inventory and Transactions sheets
"""
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from app.database.sheets import RowStore
from app.models import InventoryItem, Transaction, TransactionType
from app.utils.logger import setup_logger
from app.utils.parsing import to_float, to_int

logger = setup_logger(__name__)

LOW_STOCK_THRESHOLD = 10
RECENT_ACTIVITY_COUNT = 5
MOVEMENT_DAYS = 7


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            return None
    return None


def weekly_movement(transactions: List[Transaction], today: Optional[date] = None) -> Dict[str, List]:
    """
    Stock In / Stock Out quantities per day over the last seven days

    Returns:
        {"labels": ["Mon", ...], "stockIn": [...], "stockOut": [...]}, oldest day first
    """
    today = today or date.today()
    days = [today - timedelta(days=offset) for offset in range(MOVEMENT_DAYS - 1, -1, -1)]
    stock_in = {day: 0 for day in days}
    stock_out = {day: 0 for day in days}

    for transaction in transactions:
        day = _as_date(transaction.date)
        if day not in stock_in:
            continue
        quantity = to_int(transaction.quantity, 0)
        if transaction.type == TransactionType.STOCK_IN.value:
            stock_in[day] += quantity
        elif transaction.type == TransactionType.STOCK_OUT.value:
            stock_out[day] += quantity

    return {
        "labels": [day.strftime("%a") for day in days],
        "stockIn": [stock_in[day] for day in days],
        "stockOut": [stock_out[day] for day in days],
    }


def compute_dashboard(store: RowStore, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Dashboard summary

    - totalItems: number of inventory rows
    - lowStock: items with 0 < qty < 10
    - outOfStock: items with qty <= 0 (a blank Qty counts as 0)
    - totalValue: sum of qty * unit cost, non-numeric values counting as 0
    - recentActivities: last five transactions, newest first
    - weeklyMovement: see weekly_movement()
    """
    items = [InventoryItem.from_row(row) for row in store.read_rows(InventoryItem.table_name)]
    transactions = [Transaction.from_row(row) for row in store.read_rows(Transaction.table_name)]

    low_stock = 0
    out_of_stock = 0
    for item in items:
        level = item.stock_level
        if level is None:
            continue
        if level <= 0:
            out_of_stock += 1
        elif level < LOW_STOCK_THRESHOLD:
            low_stock += 1

    total_value = sum(to_float(item.qty) * to_float(item.unit_cost) for item in items)

    recent = transactions[-RECENT_ACTIVITY_COUNT:][::-1]

    logger.info(f"Dashboard computed: {len(items)} items, {low_stock} low, {out_of_stock} out")
    return {
        "totalItems": len(items),
        "lowStock": low_stock,
        "outOfStock": out_of_stock,
        "totalValue": total_value,
        "recentActivities": [transaction.to_row() for transaction in recent],
        "weeklyMovement": weekly_movement(transactions, today),
    }
