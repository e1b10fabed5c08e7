from enum import IntEnum


class RoomType(IntEnum):
    """Room classification, stored in descriptions as its integer value."""
    NORMAL = 0
    LADDER = 1
