"""
Workbook row store
Each table is one sheet of an .xlsx workbook; the first row holds the headers.
"""
import math
import os
import shutil
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from app.core.exceptions import UnknownTableError
from app.models import TABLE_HEADERS
from app.utils.logger import setup_logger

logger = setup_logger(__name__)

Row = Dict[str, Any]

# One lock per workbook file, shared by every RowStore pointing at it
_workbook_locks: Dict[str, threading.RLock] = {}
_workbook_locks_guard = threading.Lock()


def _workbook_lock(path: Path) -> threading.RLock:
    key = os.path.normcase(str(path.resolve()))
    with _workbook_locks_guard:
        if key not in _workbook_locks:
            _workbook_locks[key] = threading.RLock()
        return _workbook_locks[key]


def _keep_text(worksheet) -> None:
    # openpyxl turns any string starting with "=" into a formula; cells only ever hold data
    for row in worksheet.iter_rows():
        for cell in row:
            if cell.data_type == "f":
                cell.data_type = "s"


def _to_python(value: Any) -> Any:
    """Turn a pandas/numpy cell into a plain Python value (empty cells become None)"""
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _build_index(rows: List[Row], key: str) -> Dict[str, int]:
    # first row wins when an identifier repeats
    index: Dict[str, int] = {}
    for position, row in enumerate(rows):
        row_id = row.get(key)
        if row_id is not None:
            index.setdefault(str(row_id), position)
    return index


class RowStore:
    """
    Spreadsheet-as-database.

    Reads load one sheet into a DataFrame; writes rewrite that sheet of the
    workbook. Row positions are 0-based and exclude the header row.

    Every public method holds the workbook's lock, so a single read or write
    never interleaves with another on the same file. A write goes to a temp
    copy first and replaces the workbook only once the save succeeded.
    """

    def __init__(self, path: str | os.PathLike, headers: Optional[Dict[str, List[str]]] = None):
        self.path = Path(path)
        self.headers = dict(headers or TABLE_HEADERS)
        self.lock = _workbook_lock(self.path)

    def __repr__(self):
        return f"<RowStore {self.path}>"

    def _sheet_names(self) -> List[str]:
        if not self.path.exists():
            return []
        with pd.ExcelFile(self.path, engine="openpyxl") as workbook:
            return list(workbook.sheet_names)

    def _write_frame(self, name: str, df: pd.DataFrame) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.stem}-", suffix=".xlsx", dir=self.path.parent)
        os.close(fd)
        tmp_path = Path(tmp_name)

        try:
            if self.path.exists():
                shutil.copyfile(self.path, tmp_path)
                writer = pd.ExcelWriter(tmp_path, engine="openpyxl", mode="a", if_sheet_exists="replace")
            else:
                writer = pd.ExcelWriter(tmp_path, engine="openpyxl", mode="w")
            with writer:
                df.to_excel(writer, sheet_name=name, index=False)
                _keep_text(writer.sheets[name])
            os.replace(tmp_path, self.path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def _read_frame(self, name: str) -> pd.DataFrame:
        self.get_sheet(name)
        df = pd.read_excel(self.path, sheet_name=name, dtype=object, engine="openpyxl")
        return df.reset_index(drop=True)

    def get_sheet(self, name: str) -> List[str]:
        """
        Make sure the table's sheet exists

        Creates the sheet with its header row on first access.

        Returns:
            The table's header row

        Raises:
            UnknownTableError: no header row is defined for the table
        """
        if name not in self.headers:
            raise UnknownTableError(name)

        headers = self.headers[name]
        with self.lock:
            if name not in self._sheet_names():
                self._write_frame(name, pd.DataFrame(columns=headers))
                logger.info(f"Sheet created: {name} ({self.path})")
        return headers

    def provision(self) -> List[str]:
        """Create every known sheet that is still missing"""
        with self.lock:
            for name in self.headers:
                self.get_sheet(name)
            return self._sheet_names()

    def read_rows(self, name: str) -> List[Row]:
        """All rows of a table as {header: value} dicts, in storage order"""
        with self.lock:
            df = self._read_frame(name)
        return [
            {str(column): _to_python(value) for column, value in record.items()}
            for record in df.to_dict("records")
        ]

    def index_by_id(self, name: str, key: str = "ID") -> Dict[str, int]:
        """Map identifier -> row position"""
        return _build_index(self.read_rows(name), key)

    def lookup(self, name: str, row_id: str, key: str = "ID") -> Optional[Tuple[int, Row]]:
        """Find a row by identifier; returns (position, row) or None"""
        rows = self.read_rows(name)
        position = _build_index(rows, key).get(str(row_id))
        if position is None:
            return None
        return position, rows[position]

    def append_row(self, name: str, record: Row) -> int:
        """
        Append one row

        Keys missing from the record are written empty; keys that are not
        columns of the sheet are dropped.

        Returns:
            Position of the new row
        """
        with self.lock:
            df = self._read_frame(name)
            new_df = pd.DataFrame([[record.get(column) for column in df.columns]], columns=df.columns, dtype=object)

            if df.empty:
                combined_df = new_df
            else:
                combined_df = pd.concat([df, new_df], ignore_index=True)

            self._write_frame(name, combined_df)
            return len(combined_df) - 1

    def update_row(self, name: str, position: int, values: Row) -> None:
        """Overwrite the named cells of one row"""
        with self.lock:
            df = self._read_frame(name)
            if position < 0 or position >= len(df):
                raise IndexError(f"{name}: no row at position {position}")

            for column, value in values.items():
                if column not in df.columns:
                    df[column] = None
                df.at[position, column] = value

            self._write_frame(name, df)

    def delete_row(self, name: str, position: int) -> None:
        """Remove one row; later rows move up"""
        with self.lock:
            df = self._read_frame(name)
            if position < 0 or position >= len(df):
                raise IndexError(f"{name}: no row at position {position}")

            self._write_frame(name, df.drop(index=position).reset_index(drop=True))
