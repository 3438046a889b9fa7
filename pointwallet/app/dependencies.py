from __future__ import annotations

from fastapi import Depends
from fastapi import Request

from pointwallet.app.container import AppContainer
from pointwallet.services.points import PointService


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_point_service(container: AppContainer = Depends(get_container)) -> PointService:
    return container.points
