"""
Sale administration: status changes and deletion.

Status changes are validated by the sale status machine before the writer is
called, so a rejected request never reaches the database. Deletion has no
status precondition.
"""

from __future__ import annotations

import logging
from typing import Union

from domain.sale_status import SaleStatus, apply_transition
from services.ports import SaleWriter

logger = logging.getLogger(__name__)


def change_sale_status(
    writer: SaleWriter,
    sale_id: int,
    current: Union[str, SaleStatus],
    requested: Union[str, SaleStatus],
) -> SaleStatus:
    """
    Move a sale to `requested` and persist it.

    Returns:
        The status that was persisted

    Raises:
        InvalidStatus: `requested` is not a known status (nothing is written)
        RuntimeError: the writer failed
    """

    new_status = apply_transition(current, requested)
    writer.persist_status(sale_id, new_status)

    logger.info("Sale %s status changed: %s -> %s", sale_id, current, new_status.value)
    return new_status


def delete_sale(writer: SaleWriter, sale_id: int) -> None:
    """
    Remove a sale together with its line items.

    Line items go first. If removing them fails, the sale itself is left
    untouched and the error propagates.
    """

    writer.delete_line_items(sale_id)
    writer.delete_sale(sale_id)

    logger.info("Sale %s deleted with its line items", sale_id)


__all__ = ["change_sale_status", "delete_sale"]
