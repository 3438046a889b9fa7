from __future__ import annotations

from dataclasses import dataclass

from pointwallet.app.settings import Settings, load_settings
from pointwallet.services.balances import UserPointTable
from pointwallet.services.histories import PointHistoryTable
from pointwallet.services.points import PointService


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    balances: UserPointTable
    histories: PointHistoryTable
    points: PointService


def build_container(settings: Settings | None = None) -> AppContainer:
    resolved = settings or load_settings()

    balances = UserPointTable()
    histories = PointHistoryTable()
    points = PointService(balances, histories)
    if resolved.bootstrap_user_id > 0 and resolved.bootstrap_amount > 0:
        current = points.point(resolved.bootstrap_user_id).point
        if current < resolved.bootstrap_amount:
            points.charge(resolved.bootstrap_user_id, resolved.bootstrap_amount - current)

    return AppContainer(
        settings=resolved,
        balances=balances,
        histories=histories,
        points=points,
    )
