"""Shared type aliases for the domain layer."""

from __future__ import annotations

from decimal import Decimal
from typing import NewType

ProjectId = NewType("ProjectId", int)
UserId = NewType("UserId", int)
AmountLike = Decimal | int | float | str

__all__ = ["AmountLike", "ProjectId", "UserId"]
