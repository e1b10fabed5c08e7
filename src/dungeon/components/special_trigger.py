from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class SpecialTrigger:
    """Floor trigger that runs ``effect`` when the player steps on it.

    One-shot triggers become ``spent`` after firing. Re-arming triggers fire
    again once the player has stepped off (``armed`` goes back to True).
    """

    effect: Any
    rearm: bool = False
    armed: bool = True
    spent: bool = False
