from __future__ import annotations

from esper import World

from dungeon.components.block import Block
from dungeon.components.enemy import Enemy
from dungeon.components.geometry import Box
from dungeon.components.held_pickup import HeldPickup
from dungeon.components.menu_marker import MenuMarker
from dungeon.components.pickup import Pickup
from dungeon.components.placement import Placement
from dungeon.components.room_member import RoomMember
from dungeon.components.spawn_cloud import SpawnCloud
from dungeon.components.special_trigger import SpecialTrigger
from dungeon.constants import SPAWN_CLOUD_DURATION
from dungeon.layout.commands import NoOp
from dungeon.layout.descriptors import (
    BlockDescriptor,
    EnemyDescriptor,
    EntityDescriptor,
    HolderDescriptor,
    MenuMarkerDescriptor,
    PickupDescriptor,
    SpawnCloudDescriptor,
    SpecialTriggerDescriptor,
)


def _components_for(descriptor: EntityDescriptor) -> list[object]:
    if isinstance(descriptor, SpawnCloudDescriptor):
        return _components_for(descriptor.inner) + [
            SpawnCloud(remaining=SPAWN_CLOUD_DURATION, duration=SPAWN_CLOUD_DURATION)
        ]
    if isinstance(descriptor, HolderDescriptor):
        return _components_for(descriptor.enemy) + [HeldPickup(pickup=descriptor.pickup)]
    if isinstance(descriptor, EnemyDescriptor):
        return [Enemy(kind=descriptor.kind, variant=descriptor.variant)]
    if isinstance(descriptor, BlockDescriptor):
        return [Block(kind=descriptor.kind, pushable=descriptor.pushable)]
    if isinstance(descriptor, PickupDescriptor):
        return [
            Pickup(
                kind=descriptor.kind,
                holds_up=descriptor.holds_up,
                upgraded=descriptor.upgraded,
                value=descriptor.value,
            )
        ]
    if isinstance(descriptor, SpecialTriggerDescriptor):
        effect = descriptor.effect if descriptor.effect is not None else NoOp()
        return [SpecialTrigger(effect=effect, rearm=descriptor.rearm)]
    if isinstance(descriptor, MenuMarkerDescriptor):
        return [MenuMarker(font=descriptor.font)]
    raise TypeError(f"Unsupported descriptor {descriptor!r}")


def create_room_entity(
    world: World,
    descriptor: EntityDescriptor,
    box: Box,
    *,
    room_entity: int,
) -> int:
    """Spawn ``descriptor`` into ``world`` at ``box``, owned by ``room_entity``."""
    return world.create_entity(
        *_components_for(descriptor),
        Placement(box=box),
        RoomMember(room_entity=room_entity),
    )


def descriptor_kind(descriptor: EntityDescriptor) -> str:
    """Short label used in spawn events and logs."""
    if isinstance(descriptor, SpawnCloudDescriptor):
        return descriptor_kind(descriptor.inner)
    if isinstance(descriptor, HolderDescriptor):
        return f"{descriptor.kind}+{descriptor.pickup.kind}"
    if isinstance(descriptor, SpecialTriggerDescriptor):
        return "special_trigger"
    if isinstance(descriptor, MenuMarkerDescriptor):
        return "menu_marker"
    return descriptor.kind
