from __future__ import annotations

from pointwallet.app.logging import get_logger
from pointwallet.core import PointHistory, UserPoint
from pointwallet.errors import InsufficientPointError, InvalidAmountError, InvalidUserIdError
from pointwallet.services.balances import UserPointTable
from pointwallet.services.histories import PointHistoryTable
from pointwallet.services.locks import KeyedLocks

logger = get_logger(__name__)


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _check_user_id(user_id: int) -> None:
    if not _is_positive_int(user_id):
        raise InvalidUserIdError()


def _check_amount(amount: int) -> None:
    if not _is_positive_int(amount):
        raise InvalidAmountError()


class PointService:
    """
    Balance queries and mutations for point accounts.

    Mutations for one user run under that user's lock, so a charge and a use racing on
    the same account cannot lose an update. Both write the balance first and then append
    the history record stamped with the written balance's timestamp.
    """

    def __init__(
        self,
        balances: UserPointTable,
        histories: PointHistoryTable,
        locks: KeyedLocks | None = None,
    ):
        self._balances = balances
        self._histories = histories
        self._locks = locks if locks is not None else KeyedLocks()

    def point(self, user_id: int) -> UserPoint:
        _check_user_id(user_id)
        return self._balances.select_by_id(user_id)

    def history(self, user_id: int) -> list[PointHistory]:
        _check_user_id(user_id)
        return self._histories.select_all_by_user_id(user_id)

    def charge(self, user_id: int, amount: int) -> UserPoint:
        _check_user_id(user_id)
        _check_amount(amount)
        with self._locks.get(user_id):
            current = self._balances.select_by_id(user_id)
            updated = self._balances.insert_or_update(user_id, current.point + amount)
            self._histories.insert(user_id, amount, "CHARGE", updated.update_millis)
        logger.info("point_charged", user_id=user_id, amount=amount, point=updated.point)
        return updated

    def use(self, user_id: int, amount: int) -> UserPoint:
        _check_user_id(user_id)
        _check_amount(amount)
        with self._locks.get(user_id):
            current = self._balances.select_by_id(user_id)
            if current.point < amount:
                raise InsufficientPointError()
            updated = self._balances.insert_or_update(user_id, current.point - amount)
            self._histories.insert(user_id, amount, "USE", updated.update_millis)
        logger.info("point_used", user_id=user_id, amount=amount, point=updated.point)
        return updated
