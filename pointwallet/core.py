from __future__ import annotations

import time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TransactionType = Literal["CHARGE", "USE"]


class UserPoint(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    point: int
    update_millis: int = Field(alias="updateMillis")


class PointHistory(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    amount: int
    type: TransactionType
    update_millis: int = Field(alias="updateMillis")


def now_millis() -> int:
    return time.time_ns() // 1_000_000
