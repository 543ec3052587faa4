"""
Workbook provisioning script
Creates every sheet (with its header row) that the configured workbook is missing.
"""
import sys
from pathlib import Path

# UTF-8 encoding for Windows console
if sys.platform == 'win32':
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')

# Add the project root to the Python path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from app.database.config import resolve_workbook_path
from app.database.sheets import RowStore


def init_workbook(path: str | None = None):
    """Provision all sheets of the workbook"""
    store = RowStore(resolve_workbook_path(path))
    existed = store.path.exists()

    try:
        sheets = store.provision()
    except Exception as e:
        print(f"ERROR: {e}")
        raise

    print(f"SUCCESS: Workbook {'updated' if existed else 'created'}!")
    print(f"   Path: {store.path}")
    for name in sheets:
        print(f"   Sheet: {name}")


if __name__ == "__main__":
    init_workbook(sys.argv[1] if len(sys.argv) > 1 else None)
