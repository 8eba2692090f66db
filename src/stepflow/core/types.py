"""Type aliases used across stepflow."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
