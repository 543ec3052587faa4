import json

from app.api.v1.dispatcher import dispatch_get, dispatch_post

EXEC = "/api/v1/exec"


def _post(client, action, payload, **kwargs):
    body = payload if isinstance(payload, str) else json.dumps(payload)
    return client.post(
        f"{EXEC}?action={action}",
        content=body,
        headers={"Content-Type": "text/plain;charset=utf-8", **kwargs.pop("headers", {})},
        **kwargs,
    )


def test_get_missing_action(client):
    response = client.get(EXEC)

    assert response.status_code == 200
    assert response.json() == {"error": "Missing action"}


def test_get_invalid_action(client):
    response = client.get(f"{EXEC}?action=dropTables")

    assert response.status_code == 200
    assert response.json() == {"error": "Invalid action"}


def test_get_inventory_empty(client):
    response = client.get(f"{EXEC}?action=getInventory")

    assert response.status_code == 200
    assert response.json() == []


def test_post_missing_body(client):
    response = client.post(f"{EXEC}?action=addItem")

    assert response.status_code == 200
    assert response.json() == {"error": "Missing request body"}


def test_post_invalid_json(client):
    response = _post(client, "addItem", "{not json")

    assert response.json() == {"error": "Invalid JSON body"}


def test_post_non_object_body(client):
    response = _post(client, "addItem", "[1, 2]")

    assert response.json() == {"error": "Invalid JSON body"}


def test_post_body_checked_before_action(client):
    assert client.post(EXEC).json() == {"error": "Missing request body"}
    assert _post(client, "", {}).json() == {"error": "Missing action"}
    assert _post(client, "getInventory", {}).json() == {"error": "Invalid action"}


def test_add_item_then_list(client):
    created = _post(client, "addItem", {"Item": "Projector", "Qty": 2, "UnitCost": 300}).json()
    assert created["success"] is True

    items = client.get(f"{EXEC}?action=getInventory").json()
    assert len(items) == 1
    assert items[0]["ID"] == created["id"]
    assert items[0]["Status"] == "Good"
    # timestamps come back as ISO strings
    assert isinstance(items[0]["LastUpdated"], str)


def test_adjust_stock_round_trip(client):
    item_id = _post(client, "addItem", {"Item": "Paper", "Qty": 3}).json()["id"]

    result = _post(client, "adjustStock", {"id": item_id, "amount": "-5", "reason": "damage"}).json()

    assert result == {"success": True, "newQty": -2}
    stats = client.get(f"{EXEC}?action=getDashboardStats").json()
    assert stats["outOfStock"] == 1
    assert stats["recentActivities"][0]["Type"] == "Stock Out"
    assert stats["recentActivities"][0]["Quantity"] == 5


def test_not_found_becomes_error_envelope(client):
    for action, payload in [
        ("deleteItem", {"id": "missing"}),
        ("editItem", {"id": "missing", "Item": "x"}),
        ("adjustStock", {"id": "missing", "amount": 1, "reason": ""}),
    ]:
        response = _post(client, action, payload)
        assert response.status_code == 200
        assert response.json() == {"error": "Item not found"}

    assert client.get(f"{EXEC}?action=getAuditLogs").json() == []


def test_invalid_amount_becomes_error_envelope(client):
    item_id = _post(client, "addItem", {"Item": "Paper", "Qty": 3}).json()["id"]

    response = _post(client, "adjustStock", {"id": item_id, "amount": "many"})

    assert response.json() == {"error": "Invalid amount"}


def test_actor_header_recorded_in_audit_log(client):
    _post(client, "addSupplier", {"name": "Acme"}, headers={"X-User-Email": "buyer@example.com"})

    logs = client.get(f"{EXEC}?action=getAuditLogs").json()
    assert len(logs) == 1
    assert logs[0]["User"] == "buyer@example.com"
    assert logs[0]["Action"] == "Add Supplier"

    suppliers = client.get(f"{EXEC}?action=getSuppliers").json()
    assert [supplier["Name"] for supplier in suppliers] == ["Acme"]


def test_default_actor_without_header(client, monkeypatch):
    monkeypatch.setattr("app.auth.dependencies.DEFAULT_USER", "front-desk")

    _post(client, "addItem", {"Item": "Stapler", "Qty": 1})

    assert client.get(f"{EXEC}?action=getAuditLogs").json()[0]["User"] == "front-desk"


def test_storage_failure_becomes_error_envelope(store, monkeypatch):
    def broken(name):
        raise OSError("disk full")

    monkeypatch.setattr(store, "read_rows", broken)

    assert dispatch_get(store, "getInventory") == {"error": "disk full"}


def test_dispatch_post_without_http(store):
    result = dispatch_post(store, "addSupplier", b'{"name": "Globex"}', "buyer@example.com")

    assert result["success"] is True
    assert dispatch_get(store, "getSuppliers")[0]["Name"] == "Globex"


def test_status_endpoint(client):
    response = client.get("/api/status")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_edit_item_round_trip(client):
    item_id = _post(client, "addItem", {"Item": "Scanner", "Qty": 2, "Location": "Room 1"}).json()["id"]

    response = _post(client, "editItem", {"id": item_id, "Location": "Room 5", "Qty": 0})

    assert response.status_code == 200
    assert response.json() == {"success": True}
    item = client.get(f"{EXEC}?action=getInventory").json()[0]
    assert item["ID"] == item_id
    assert item["Location"] == "Room 5"
    assert item["Status"] == "Out of Stock"
    logs = client.get(f"{EXEC}?action=getAuditLogs").json()
    assert [log["Action"] for log in logs] == ["Add Item", "Edit Item"]


def test_control_characters_become_error_envelope(client):
    _post(client, "addItem", {"Item": "Scanner", "Qty": 2})

    response = _post(client, "addItem", {"Item": "Printer", "Project": "bad\u0001"})

    assert response.status_code == 200
    assert response.json() == {"error": "Invalid characters in Project"}
    assert len(client.get(f"{EXEC}?action=getInventory").json()) == 1


def test_fractional_amount_becomes_error_envelope(client):
    item_id = _post(client, "addItem", {"Item": "Paper", "Qty": 3}).json()["id"]

    response = _post(client, "adjustStock", {"id": item_id, "amount": 1.5, "reason": "half"})

    assert response.json() == {"error": "Amount must be a whole number"}
    assert client.get(f"{EXEC}?action=getInventory").json()[0]["Qty"] == 3
