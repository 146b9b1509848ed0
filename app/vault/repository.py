# app/vault/repository.py
import threading
import uuid
from typing import Dict

from ..errors import ReceiptNotFound

class ReceiptStore:
    """
    In-memory receipt id -> points map, shared by request handlers.
    Entries are written once and never changed or removed.
    """

    def __init__(self):
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def insert_if_absent(self, receipt_id: str, points: int) -> bool:
        with self._lock:
            if receipt_id in self._points:
                return False
            self._points[receipt_id] = points
            return True

    def add(self, points: int) -> str:
        """Store points under a fresh uuid4 id and return the id."""
        while True:
            receipt_id = str(uuid.uuid4())
            if self.insert_if_absent(receipt_id, points):
                return receipt_id

    def get(self, receipt_id: str) -> int:
        with self._lock:
            if receipt_id not in self._points:
                raise ReceiptNotFound(receipt_id)
            return self._points[receipt_id]

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
