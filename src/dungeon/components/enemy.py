from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Enemy:
    """Enemy marker; behavior systems key off ``kind`` and ``variant``."""

    kind: str
    variant: str | None = None
    defeated: bool = False
