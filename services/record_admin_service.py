"""
Generic dashboard row actions.

The dashboard tables post a small form for each row:
- actionType: "delete" or "toggleStatus"
- table: target table (clientes, produtos, vendas, usuarios)
- id: row id
- status: for toggleStatus, the row's *current* flag as "true"/"false"

toggleStatus flips the posted flag: "true" becomes inactive, anything else
becomes active.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from services.ports import DELETABLE_TABLES, TOGGLEABLE_TABLES, RecordWriter, SaleWriter
from services.sale_admin_service import delete_sale

logger = logging.getLogger(__name__)

ACTION_DELETE = "delete"
ACTION_TOGGLE_STATUS = "toggleStatus"

_SALES_TABLE = "vendas"


class InvalidRecordAction(ValueError):
    """Raised when a row action is incomplete, unknown or targets a table it cannot apply to."""
    pass


@dataclass(frozen=True, slots=True)
class RecordAction:
    action_type: str
    table: str
    row_id: int
    current_status: Optional[str] = None

    @staticmethod
    def from_form(form: Mapping[str, Any]) -> "RecordAction":
        """
        Build a RecordAction from posted form fields.

        Raises:
            InvalidRecordAction: actionType, table or id missing, or id not an integer
        """

        def _text(name: str) -> str:
            value = form.get(name)
            return "" if value is None else str(value).strip()

        action_type = _text("actionType")
        table = _text("table")
        raw_id = _text("id")

        if not action_type or not table or not raw_id:
            raise InvalidRecordAction("actionType, table and id are required")

        try:
            row_id = int(raw_id)
        except ValueError:
            raise InvalidRecordAction(f"id must be an integer, got {raw_id!r}") from None

        status = form.get("status")
        return RecordAction(
            action_type=action_type,
            table=table,
            row_id=row_id,
            current_status=None if status is None else str(status),
        )


@dataclass(frozen=True, slots=True)
class RecordActionResult:
    message: str
    new_status: Optional[bool] = None


def next_active_flag(current_status: Optional[str]) -> bool:
    """The flag a toggle should write, given the posted current flag."""
    return (current_status or "").strip().lower() != "true"


def perform_record_action(
    writer: RecordWriter,
    action: RecordAction,
    sales: Optional[SaleWriter] = None,
) -> RecordActionResult:
    """
    Apply a dashboard row action.

    Deleting from the sales table requires `sales`, which removes the sale's
    line items before the sale itself.

    Raises:
        InvalidRecordAction: unknown action, a table the action cannot target, or
            a sale delete without `sales`
        RuntimeError: the writer failed
    """

    if action.action_type == ACTION_DELETE:
        if action.table not in DELETABLE_TABLES:
            raise InvalidRecordAction(f"Cannot delete rows from {action.table!r}")

        if action.table == _SALES_TABLE:
            if sales is None:
                raise InvalidRecordAction(
                    "Deleting a sale requires the sale writer so its line items are removed first"
                )
            delete_sale(sales, action.row_id)
        else:
            writer.delete_row(action.table, action.row_id)

        logger.info("Deleted %s row %s", action.table, action.row_id)
        return RecordActionResult(message="Item deleted")

    if action.action_type == ACTION_TOGGLE_STATUS:
        if action.table not in TOGGLEABLE_TABLES:
            raise InvalidRecordAction(f"Cannot toggle status on {action.table!r}")

        new_status = next_active_flag(action.current_status)
        writer.set_active(action.table, action.row_id, new_status)

        logger.info("Set %s row %s active=%s", action.table, action.row_id, new_status)
        return RecordActionResult(message="Status updated", new_status=new_status)

    raise InvalidRecordAction(f"Unknown action {action.action_type!r}")


__all__ = [
    "ACTION_DELETE",
    "ACTION_TOGGLE_STATUS",
    "InvalidRecordAction",
    "RecordAction",
    "RecordActionResult",
    "next_active_flag",
    "perform_record_action",
]
