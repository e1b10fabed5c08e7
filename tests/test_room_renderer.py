from types import SimpleNamespace

from esper import World

from dungeon.components.enemy import Enemy
from dungeon.components.spawn_cloud import SpawnCloud
from dungeon.events.bus import EVENT_ENEMY_DEFEATED, EventBus
from dungeon.factories.rooms import spawn_room
from dungeon.layout.loader import decode_room
from dungeon.rendering.room_renderer import (
    VARIANT_COLORS,
    RoomRenderContext,
    RoomRenderer,
    entity_variant,
)
from dungeon.world import create_room_systems, create_world

from tests.helpers import room_lines


class _RecordingArcade:
    def __init__(self) -> None:
        self.calls = []

    def draw_lbwh_rectangle_filled(self, *args):
        self.calls.append(args)


class _HeadlessArcade:
    def __getattr__(self, name):  # pragma: no cover - defensive path
        raise AssertionError(f"Unexpected draw call: {name}")


def _world():
    world = World()
    spawn_room(
        world,
        EventBus(),
        decode_room(room_lines({(0, 0): "npb", (1, 0): "gmb;hi", (2, 0): "pb2", (3, 0): "spt;tu"})),
    )
    return world


def test_variants_follow_components():
    world = _world()
    variants = sorted(
        entity_variant(world, entity) for entity, _ in world.get_component(SpawnCloud)
    )
    assert variants == ["spawn_cloud"]
    (enemy, _), = world.get_component(Enemy)
    world.remove_component(enemy, SpawnCloud)
    assert entity_variant(world, enemy) == "holder"


def test_render_flips_room_space_to_window_space():
    world = _world()
    renderer = RoomRenderer(world)
    arcade = _RecordingArcade()
    ctx = RoomRenderContext(window_width=768, window_height=528)

    renderer.render(arcade, ctx)

    assert len(arcade.calls) == 4
    layout = renderer.layout()
    first = layout[min(layout)]
    assert first[:4] == (0.0, 480.0, 48.0, 48.0)
    assert first[4] == VARIANT_COLORS["block"]
    colors = {entry[4] for entry in layout.values()}
    assert VARIANT_COLORS["pushable_block"] in colors
    assert VARIANT_COLORS["special_trigger"] in colors


def test_headless_render_records_layout_without_drawing():
    world = _world()
    renderer = RoomRenderer(world)
    renderer.render(_HeadlessArcade(), SimpleNamespace(window_width=768, window_height=528), headless=True)
    assert len(renderer.layout()) == 4


def test_cloud_color_fades_toward_the_wrapped_enemy():
    world = _world()
    renderer = RoomRenderer(world)
    ctx = RoomRenderContext(window_width=768, window_height=528)
    (enemy, cloud), = world.get_component(SpawnCloud)

    renderer.render(_HeadlessArcade(), ctx, headless=True)
    assert renderer.layout()[enemy][4] == VARIANT_COLORS["spawn_cloud"]

    cloud.remaining = cloud.duration / 2
    renderer.render(_HeadlessArcade(), ctx, headless=True)
    assert renderer.layout()[enemy][4] == (223, 170, 130)


def test_defeated_enemy_is_not_drawn():
    world = create_world()
    bus = EventBus()
    create_room_systems(world, bus)
    spawn_room(world, bus, decode_room(room_lines({(1, 0): "gmb"})))
    (enemy, _), = world.get_component(Enemy)
    renderer = RoomRenderer(world)
    ctx = RoomRenderContext(window_width=768, window_height=528)

    bus.emit(EVENT_ENEMY_DEFEATED, entity=enemy)
    renderer.render(_HeadlessArcade(), ctx, headless=True)

    assert entity_variant(world, enemy) is None
    assert enemy not in renderer.layout()
