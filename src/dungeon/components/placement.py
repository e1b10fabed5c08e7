from dataclasses import dataclass

from dungeon.components.geometry import Box


@dataclass(slots=True)
class Placement:
    box: Box
