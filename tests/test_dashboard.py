from datetime import date, datetime

from app.models import Transaction
from app.modules.dashboard import compute_dashboard, weekly_movement
from app.modules.inventory import adjust_stock


def _seed(store, *items):
    for index, (qty, cost) in enumerate(items):
        store.append_row("Inventory", {"ID": f"i{index}", "Item": f"Item {index}", "Qty": qty, "UnitCost": cost})


def test_empty_workbook(store):
    stats = compute_dashboard(store)

    assert stats["totalItems"] == 0
    assert stats["lowStock"] == 0
    assert stats["outOfStock"] == 0
    assert stats["totalValue"] == 0
    assert stats["recentActivities"] == []


def test_total_value_treats_text_as_zero(store):
    _seed(store, (2, 5), ("x", 3))

    stats = compute_dashboard(store)

    assert stats["totalItems"] == 2
    assert stats["totalValue"] == 10


def test_stock_counts_are_disjoint(store):
    _seed(store, (0, 1), (-3, 1), (1, 1), (9, 1), (10, 1), (50, 1), (None, 1), ("n/a", 1))

    stats = compute_dashboard(store)

    assert stats["totalItems"] == 8
    # blank quantity counts as zero, text that is not a number counts nowhere
    assert stats["outOfStock"] == 3
    assert stats["lowStock"] == 2


def test_recent_activities_newest_first(store):
    _seed(store, (100, 1))
    for amount in range(1, 8):
        adjust_stock(store, "i0", amount, f"batch {amount}", "clerk@example.com")

    recent = compute_dashboard(store)["recentActivities"]

    assert [activity["Notes"] for activity in recent] == ["batch 7", "batch 6", "batch 5", "batch 4", "batch 3"]


def test_weekly_movement_buckets_by_day():
    today = date(2024, 5, 12)
    transactions = [
        Transaction(date=datetime(2024, 5, 12, 8), type="Stock In", quantity=4),
        Transaction(date=datetime(2024, 5, 12, 15), type="Stock Out", quantity=1),
        Transaction(date=datetime(2024, 5, 6, 10), type="Stock In", quantity=2),
        Transaction(date="2024-05-10", type="Stock Out", quantity=3),
        # outside the window
        Transaction(date=datetime(2024, 5, 5, 10), type="Stock In", quantity=99),
        Transaction(date=None, type="Stock In", quantity=99),
    ]

    movement = weekly_movement(transactions, today)

    assert movement["labels"] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert movement["stockIn"] == [2, 0, 0, 0, 0, 0, 4]
    assert movement["stockOut"] == [0, 0, 0, 0, 3, 0, 1]


def test_dashboard_includes_todays_movement(store):
    _seed(store, (5, 1))
    adjust_stock(store, "i0", 3, "delivery", "clerk@example.com")

    movement = compute_dashboard(store)["weeklyMovement"]

    assert movement["stockIn"][-1] == 3
    assert sum(movement["stockOut"]) == 0
