from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dungeon.layout.descriptors import PickupDescriptor


@dataclass(slots=True)
class HeldPickup:
    """Pickup carried by an enemy and dropped where it dies."""
    pickup: "PickupDescriptor"
