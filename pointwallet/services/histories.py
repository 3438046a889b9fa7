from __future__ import annotations

import threading

from pointwallet.core import PointHistory, TransactionType


class PointHistoryTable:
    """Append-only transaction ledger. Record ids are global, not per user."""

    def __init__(self):
        self._lock = threading.Lock()
        self._rows: list[PointHistory] = []
        self._next_id = 1

    def insert(self, user_id: int, amount: int, type: TransactionType, update_millis: int) -> PointHistory:
        with self._lock:
            row = PointHistory(
                id=self._next_id,
                user_id=user_id,
                amount=amount,
                type=type,
                update_millis=update_millis,
            )
            self._next_id += 1
            self._rows.append(row)
            return row

    def select_all_by_user_id(self, user_id: int) -> list[PointHistory]:
        with self._lock:
            return [row for row in self._rows if row.user_id == user_id]
