from __future__ import annotations

from fastapi import FastAPI

from pointwallet.api.points import router as points_router
from pointwallet.api.system import router as system_router


def register_routes(app: FastAPI) -> None:
    app.include_router(system_router)
    app.include_router(points_router)
