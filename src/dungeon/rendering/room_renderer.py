from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from esper import World

from dungeon.components.block import Block
from dungeon.components.enemy import Enemy
from dungeon.components.held_pickup import HeldPickup
from dungeon.components.menu_marker import MenuMarker
from dungeon.components.pickup import Pickup
from dungeon.components.placement import Placement
from dungeon.components.spawn_cloud import SpawnCloud
from dungeon.components.special_trigger import SpecialTrigger

Color = Tuple[int, int, int]

VARIANT_COLORS: Dict[str, Color] = {
    "block": (70, 90, 140),
    "pushable_block": (110, 130, 190),
    "enemy": (196, 48, 48),
    "holder": (226, 120, 40),
    "spawn_cloud": (220, 220, 220),
    "pickup": (240, 200, 60),
    "special_trigger": (90, 200, 120),
    "menu_marker": (160, 100, 220),
}
UNKNOWN_COLOR: Color = (255, 0, 255)


@dataclass(slots=True)
class RoomRenderContext:
    window_width: int
    window_height: int


def entity_variant(world: World, entity: int) -> str | None:
    """Name of the drawing style for ``entity``; clouds hide what they wrap.

    Defeated enemies have no style and are not drawn.
    """
    if world.has_component(entity, Enemy):
        if world.component_for_entity(entity, Enemy).defeated:
            return None
        if world.has_component(entity, SpawnCloud):
            return "spawn_cloud"
        return "holder" if world.has_component(entity, HeldPickup) else "enemy"
    if world.has_component(entity, SpawnCloud):
        return "spawn_cloud"
    if world.has_component(entity, Block):
        block = world.component_for_entity(entity, Block)
        return "pushable_block" if block.pushable else "block"
    if world.has_component(entity, Pickup):
        return "pickup"
    if world.has_component(entity, SpecialTrigger):
        return "special_trigger"
    if world.has_component(entity, MenuMarker):
        return "menu_marker"
    return None


def cloud_color(world: World, entity: int) -> Color:
    """Cloud colour blended toward the wrapped enemy as the cloud runs out."""
    cloud = world.component_for_entity(entity, SpawnCloud)
    inner = "holder" if world.has_component(entity, HeldPickup) else "enemy"
    start, end = VARIANT_COLORS["spawn_cloud"], VARIANT_COLORS[inner]
    t = cloud.progress
    return tuple(round(a + (b - a) * t) for a, b in zip(start, end))


class RoomRenderer:
    """Draws every placed room entity as a filled tile-sized rectangle."""

    def __init__(self, world: World):
        self.world = world
        self._layout: Dict[int, Tuple[float, float, float, float, Color]] = {}

    def render(self, arcade, ctx: RoomRenderContext, headless: bool = False) -> None:
        self._layout.clear()
        for entity, placement in sorted(self.world.get_component(Placement), key=lambda pair: pair[0]):
            variant = entity_variant(self.world, entity)
            if variant is None:
                continue
            if variant == "spawn_cloud":
                color = cloud_color(self.world, entity)
            else:
                color = VARIANT_COLORS.get(variant, UNKNOWN_COLOR)
            box = placement.box
            # Room space grows downward; arcade's origin is bottom-left.
            left = float(box.x)
            bottom = float(ctx.window_height - box.bottom)
            self._layout[entity] = (left, bottom, float(box.width), float(box.height), color)
            if headless:
                continue
            arcade.draw_lbwh_rectangle_filled(left, bottom, box.width, box.height, color)

    def layout(self) -> Dict[int, Tuple[float, float, float, float, Color]]:
        return dict(self._layout)
