"""Cooperative cancellation between output rows."""
from __future__ import annotations

from typing import Callable, Optional

from ..errors import ResizeCancelled

CancelCheck = Optional[Callable[[], bool]]


def raise_if_cancelled(cancel: CancelCheck) -> None:
    if cancel is not None and cancel():
        raise ResizeCancelled("resize cancelled")
