from __future__ import annotations

import logging

from esper import World

from dungeon.components.room import Room
from dungeon.events.bus import EVENT_ROOM_SPAWNED, EventBus
from dungeon.factories.room_entities import create_room_entity
from dungeon.layout.loader import RoomLayout

logger = logging.getLogger(__name__)


def spawn_room(world: World, event_bus: EventBus, layout: RoomLayout) -> int:
    """Create the room entity and every placed entity decoded for it."""
    room_entity = world.create_entity(
        Room(
            position=layout.position,
            doors=list(layout.doors),
            spawn_points=layout.spawn_points,
            room_type=layout.room_type,
            clear_effects=layout.clear_effects,
        )
    )
    for placed in layout.entities:
        create_room_entity(world, placed.descriptor, placed.box, room_entity=room_entity)
    logger.debug("Spawned room entity %d with %d members", room_entity, len(layout.entities))
    event_bus.emit(
        EVENT_ROOM_SPAWNED,
        room_entity=room_entity,
        position=layout.position,
        entity_count=len(layout.entities),
    )
    return room_entity
