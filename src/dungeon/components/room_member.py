from dataclasses import dataclass


@dataclass(slots=True)
class RoomMember:
    """Back-reference from a spawned entity to the room entity that owns it."""
    room_entity: int
