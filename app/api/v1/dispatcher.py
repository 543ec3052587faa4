"""
Action dispatcher
Routes ?action=<name> requests to the inventory operations.

Every response is HTTP 200: either the operation's result or {"error": message}.
"""
import json
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.auth.dependencies import get_current_actor
from app.core.exceptions import InventoryError
from app.database.config import get_store
from app.database.sheets import RowStore
from app.modules.audit import list_audit_logs
from app.modules.dashboard import compute_dashboard
from app.modules.inventory import add_item, adjust_stock, delete_item, edit_item, list_inventory
from app.modules.suppliers import add_supplier, list_suppliers
from app.utils.logger import setup_logger
from app.utils.response_models import ErrorResponse

logger = setup_logger(__name__)
router = APIRouter()

MISSING_ACTION = "Missing action"
INVALID_ACTION = "Invalid action"
MISSING_BODY = "Missing request body"
INVALID_BODY = "Invalid JSON body"

GET_ACTIONS: Dict[str, Callable[[RowStore], Any]] = {
    "getDashboardStats": compute_dashboard,
    "getInventory": list_inventory,
    "getSuppliers": list_suppliers,
    "getAuditLogs": list_audit_logs,
}


def _edit_item(store: RowStore, data: Dict[str, Any], actor: str):
    return edit_item(store, data.get("id"), data, actor)


def _delete_item(store: RowStore, data: Dict[str, Any], actor: str):
    return delete_item(store, data.get("id"), actor)


def _adjust_stock(store: RowStore, data: Dict[str, Any], actor: str):
    return adjust_stock(store, data.get("id"), data.get("amount"), data.get("reason"), actor)


POST_ACTIONS: Dict[str, Callable[[RowStore, Dict[str, Any], str], Any]] = {
    "addItem": add_item,
    "editItem": _edit_item,
    "deleteItem": _delete_item,
    "adjustStock": _adjust_stock,
    "addSupplier": add_supplier,
}


def error_payload(message: str) -> Dict[str, str]:
    return ErrorResponse(error=message).model_dump()


def _unknown_action(action: Optional[str]) -> Dict[str, str]:
    return error_payload(INVALID_ACTION if action else MISSING_ACTION)


def _run(action: str, operation: Callable[[], Any]) -> Any:
    try:
        return operation()
    except InventoryError as e:
        logger.warning(f"{action} failed: {e.message}")
        return error_payload(e.message)
    except Exception as e:
        logger.error(f"{action} failed: {e}", exc_info=True)
        return error_payload(str(e))


def dispatch_get(store: RowStore, action: Optional[str]) -> Any:
    """Run a read action"""
    handler = GET_ACTIONS.get(action) if action else None
    if handler is None:
        return _unknown_action(action)
    return _run(action, lambda: handler(store))


def dispatch_post(store: RowStore, action: Optional[str], body: Optional[bytes | str], actor: str) -> Any:
    """
    Run a mutating action

    Args:
        store: row store
        action: action name from the query string
        body: raw request body, expected to hold a JSON object
        actor: identity of the caller

    Returns:
        Operation result or error envelope
    """
    if body is None or len(body) == 0:
        return error_payload(MISSING_BODY)
    try:
        data = json.loads(body)
    except (TypeError, ValueError):
        return error_payload(INVALID_BODY)
    if not isinstance(data, dict):
        return error_payload(INVALID_BODY)

    handler = POST_ACTIONS.get(action) if action else None
    if handler is None:
        return _unknown_action(action)
    return _run(action, lambda: handler(store, data, actor))


def _json(result: Any) -> JSONResponse:
    return JSONResponse(content=jsonable_encoder(result))


@router.get("/exec")
async def exec_get(
    action: Optional[str] = Query(None),
    store: RowStore = Depends(get_store),
):
    """Read actions: getDashboardStats, getInventory, getSuppliers, getAuditLogs"""
    result = await run_in_threadpool(dispatch_get, store, action)
    return _json(result)


@router.post("/exec")
async def exec_post(
    request: Request,
    action: Optional[str] = Query(None),
    store: RowStore = Depends(get_store),
    actor: str = Depends(get_current_actor),
):
    """
    Mutating actions: addItem, editItem, deleteItem, adjustStock, addSupplier

    The body is read raw so clients may send JSON as text/plain.
    """
    body = await request.body()
    result = await run_in_threadpool(dispatch_post, store, action, body, actor)
    return _json(result)
