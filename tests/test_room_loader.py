import logging

import pytest

from dungeon.components.direction import Direction
from dungeon.components.door_state import DoorState
from dungeon.components.geometry import Box, Point
from dungeon.components.room_type import RoomType
from dungeon.errors import RowShapeError, UnknownTokenError
from dungeon.layout.commands import NoOp, PlaySound, SetDoorOpen
from dungeon.layout.descriptors import HolderDescriptor, SpawnCloudDescriptor, tile_box
from dungeon.layout.loader import decode_room, load_room, read_room_file

from tests.helpers import ROOMS_DIR, room_lines


def _kinds(layout):
    kinds = []
    for placed in layout.entities:
        descriptor = placed.descriptor
        if isinstance(descriptor, SpawnCloudDescriptor):
            descriptor = descriptor.inner
        if isinstance(descriptor, HolderDescriptor):
            kinds.append(f"{descriptor.kind}+{descriptor.pickup.kind}")
        else:
            kinds.append(descriptor.kind)
    return kinds


def test_load_sample_room():
    layout = load_room(ROOMS_DIR / "room_2_5.csv")
    assert layout.position == Point(2, 5)
    assert layout.doors == (DoorState.OPEN, DoorState.CLOSED, DoorState.LOCKED, DoorState.BLOCKED_HOLE)
    assert layout.room_type is RoomType.NORMAL
    assert layout.clear_effects == frozenset({SetDoorOpen(Direction.UP), PlaySound("KeyAppearance")})
    assert _kinds(layout) == [
        "non_pushable",
        "non_pushable",
        "goomba+heart",
        "goriya+key",
        "stalfos",
        "pushable_1",
        "keese",
        "non_pushable",
        "non_pushable",
    ]


def test_sample_rooms_all_decode():
    for path in sorted(ROOMS_DIR.glob("*.csv")):
        load_room(path)


def test_ladder_room_type():
    layout = load_room(ROOMS_DIR / "ladder_room.csv")
    assert layout.room_type is RoomType.LADDER
    assert layout.clear_effects == frozenset({NoOp()})


def test_boxes_follow_tile_size_and_origin():
    layout = decode_room(room_lines({(6, 4): "npb"}), tile_size=16, origin=(8, 64))
    assert layout.entities[0].box == Box(8 + 6 * 16, 64 + 4 * 16, 16, 16)
    assert tile_box(Point(6, 4), 16, (8, 64)) == layout.entities[0].box


def test_spawn_points_use_tile_size():
    layout = decode_room(room_lines(), tile_size=16)
    assert layout.spawn_points[0] == Point(32, 80)
    assert layout.spawn_points[1] == Point(120, 128)


def test_decoding_twice_yields_equal_layouts():
    lines = read_room_file(ROOMS_DIR / "room_2_5.csv")
    assert decode_room(lines) == decode_room(lines)


def test_missing_trailer_row_raises():
    lines = room_lines()[:14]
    with pytest.raises(RowShapeError, match="room type") as excinfo:
        decode_room(lines)
    assert excinfo.value.row == 14


def test_read_room_file_strips_byte_order_mark(tmp_path):
    path = tmp_path / "room.csv"
    path.write_text("\ufeff" + "\n".join(room_lines({(0, 0): "npb"})) + "\n", encoding="utf-8")
    lines = read_room_file(path)
    assert lines[0].startswith("npb,")
    assert len(lines) == 16


def test_load_room_logs_and_reraises(tmp_path, caplog):
    path = tmp_path / "broken.csv"
    path.write_text("\n".join(room_lines({(2, 3): "oops"})), encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="dungeon.layout.loader"):
        with pytest.raises(UnknownTokenError):
            load_room(path)
    assert "broken.csv" in caplog.text
