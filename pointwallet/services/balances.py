from __future__ import annotations

import threading

from pointwallet.core import UserPoint, now_millis


class UserPointTable:
    """In-memory balance store keyed by user id.

    Unknown users read as a zero balance stamped with the current time; the default
    is never written back, so a read has no side effects.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._rows: dict[int, UserPoint] = {}

    def select_by_id(self, user_id: int) -> UserPoint:
        with self._lock:
            row = self._rows.get(user_id)
        if row is None:
            return UserPoint(id=user_id, point=0, update_millis=now_millis())
        return row

    def insert_or_update(self, user_id: int, point: int) -> UserPoint:
        row = UserPoint(id=user_id, point=point, update_millis=now_millis())
        with self._lock:
            self._rows[user_id] = row
        return row
