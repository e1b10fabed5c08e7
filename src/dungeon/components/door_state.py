from enum import Enum, auto


class DoorState(Enum):
    OPEN = auto()
    CLOSED = auto()
    NONE = auto()
    LOCKED = auto()
    # Bombable wall that has not been opened yet.
    BLOCKED_HOLE = auto()
    HOLE = auto()
