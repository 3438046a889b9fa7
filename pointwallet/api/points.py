from __future__ import annotations

from fastapi import APIRouter, Body, Depends
from pydantic import StrictInt

from pointwallet.app.dependencies import get_point_service
from pointwallet.core import PointHistory, UserPoint
from pointwallet.services.points import PointService

router = APIRouter(prefix="/point", tags=["point"])


@router.get("/{id}", response_model=UserPoint)
def point(id: int, points: PointService = Depends(get_point_service)):
    return points.point(id)


@router.get("/{id}/histories", response_model=list[PointHistory])
def history(id: int, points: PointService = Depends(get_point_service)):
    return points.history(id)


@router.patch("/{id}/charge", response_model=UserPoint)
def charge(id: int, amount: StrictInt = Body(...), points: PointService = Depends(get_point_service)):
    return points.charge(id, amount)


@router.patch("/{id}/use", response_model=UserPoint)
def use(id: int, amount: StrictInt = Body(...), points: PointService = Depends(get_point_service)):
    return points.use(id, amount)
