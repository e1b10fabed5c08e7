from __future__ import annotations

from typing import Sequence

from dungeon.components.geometry import Box, Point
from dungeon.layout.descriptors import (
    EnemyDescriptor,
    HolderDescriptor,
    PickupDescriptor,
    PlacedEntity,
    SpawnCloudDescriptor,
    SpecialTriggerDescriptor,
)
from dungeon.layout.effect_tokens import decode_effect
from dungeon.layout.entity_tokens import decode_entity


def compose_tile(tokens: Sequence[str], cell: Point, box: Box) -> list[PlacedEntity]:
    """Turn one cell's tokens into placed entities, in token order.

    A special trigger consumes the following token as its effect. An enemy
    followed by a pickup becomes a holder that drops the pickup. Every enemy
    enters the room inside a spawn cloud. Triggers are matched before enemies.
    """
    placed: list[PlacedEntity] = []
    k = 0
    while k < len(tokens):
        descriptor = decode_entity(tokens[k], cell)
        has_next = k + 1 < len(tokens)

        if isinstance(descriptor, SpecialTriggerDescriptor) and has_next:
            effect = decode_effect(tokens[k + 1], row=cell.y, column=cell.x)
            placed.append(PlacedEntity(descriptor.with_effect(effect), box))
            k += 2
            continue

        if isinstance(descriptor, EnemyDescriptor):
            if has_next:
                follower = decode_entity(tokens[k + 1], cell)
                if isinstance(follower, PickupDescriptor):
                    holder = HolderDescriptor(enemy=descriptor, pickup=follower)
                    placed.append(PlacedEntity(SpawnCloudDescriptor(holder), box))
                    k += 2
                    continue
            placed.append(PlacedEntity(SpawnCloudDescriptor(descriptor), box))
        elif descriptor is not None:
            placed.append(PlacedEntity(descriptor, box))
        k += 1
    return placed
