"""Type aliases used across StaffDir."""

from __future__ import annotations

from typing import Any, Callable

JsonDict = dict[str, Any]
RawRow = list[Any]
ProgressCallback = Callable[[float], None]
