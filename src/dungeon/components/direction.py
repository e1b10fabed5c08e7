from enum import Enum


class Direction(Enum):
    """Room walls, declared clockwise from the left as door rows list them."""
    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
