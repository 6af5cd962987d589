"""In-memory receipt store shared by all requests of one application."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict

from receipt_points.core.errors import ReceiptNotFoundError
from receipt_points.models.schemas import Receipt

logger = logging.getLogger(__name__)


class ReceiptStore:
    """Maps generated receipt ids to receipts for the life of the process.

    Receipts are only ever added; there is no update or delete.  All access
    goes through a lock so concurrent requests can share one instance.
    """

    def __init__(self) -> None:
        self._receipts: Dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt: Receipt) -> str:
        """Store ``receipt`` under a fresh random id and return that id."""
        receipt_id = str(uuid.uuid4())
        stamped = receipt.model_copy(update={"id": receipt_id})
        with self._lock:
            self._receipts[receipt_id] = stamped
        logger.info("[store] stored receipt id=%s items=%d", receipt_id, len(stamped.items))
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        """Return the receipt stored under ``receipt_id``.

        :raises ReceiptNotFoundError: if no receipt has that id.
        """
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            logger.warning("[store] receipt not found id=%s", receipt_id)
            raise ReceiptNotFoundError(receipt_id)
        return receipt

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
