"""
Base class for sheet-backed records
"""
import uuid
from datetime import date, datetime, time
from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

# A single spreadsheet cell as the row store returns it
Cell = Optional[Union[datetime, date, time, int, float, str]]


class SheetRecord(BaseModel):
    """
    One row of a named table.

    Field aliases are the sheet's header names and field order is the header
    order, so the record class is also the table's schema.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    table_name: ClassVar[str] = ""

    @classmethod
    def headers(cls) -> List[str]:
        return [field.alias or name for name, field in cls.model_fields.items()]

    @classmethod
    def from_row(cls, row: Dict[str, Any]):
        """Build a record from a {header: value} row"""
        return cls.model_validate(row)

    def to_row(self) -> Dict[str, Any]:
        """Serialize back to a {header: value} row"""
        return self.model_dump(by_alias=True)


def new_id() -> str:
    """Fresh random row identifier"""
    return str(uuid.uuid4())
