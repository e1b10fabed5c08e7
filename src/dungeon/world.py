from __future__ import annotations

from dataclasses import dataclass

from esper import World

from dungeon.constants import ROOM_ORIGIN, TILE_SIZE
from dungeon.events.bus import EventBus
from dungeon.systems.command_system import CommandSystem
from dungeon.systems.item_holder_system import ItemHolderSystem
from dungeon.systems.room_clear_system import RoomClearSystem
from dungeon.systems.spawn_cloud_system import SpawnCloudSystem
from dungeon.systems.special_trigger_system import SpecialTriggerSystem


@dataclass(slots=True)
class RoomSystems:
    commands: CommandSystem
    spawn_clouds: SpawnCloudSystem
    item_holders: ItemHolderSystem
    special_triggers: SpecialTriggerSystem
    room_clear: RoomClearSystem


def create_world() -> World:
    return World()


def create_room_systems(
    world: World,
    event_bus: EventBus,
    *,
    tile_size: int = TILE_SIZE,
    origin: tuple[int, int] = ROOM_ORIGIN,
) -> RoomSystems:
    """Wire the systems that bring decoded room entities to life."""
    commands = CommandSystem(world, event_bus, tile_size=tile_size, origin=origin)
    return RoomSystems(
        commands=commands,
        spawn_clouds=SpawnCloudSystem(world, event_bus),
        item_holders=ItemHolderSystem(world, event_bus),
        special_triggers=SpecialTriggerSystem(world, event_bus, commands),
        room_clear=RoomClearSystem(world, event_bus, commands),
    )
