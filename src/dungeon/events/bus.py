from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# ROOM LIFECYCLE
# ============================================================================
EVENT_ROOM_SPAWNED = "room_spawned"                # payload: room_entity=int, position=(x,y), entity_count=int
EVENT_ROOM_CLEARED = "room_cleared"                # payload: room_entity=int
EVENT_DOOR_STATE_CHANGED = "door_state_changed"    # payload: room_entity=int, direction=Direction, previous=DoorState, state=DoorState


# ============================================================================
# ENTITIES
# ============================================================================
EVENT_ENTITY_SPAWNED = "entity_spawned"            # payload: entity=int, room_entity=int, kind=str
EVENT_ENEMY_REVEALED = "enemy_revealed"            # payload: entity=int
EVENT_ENEMY_DEFEATED = "enemy_defeated"            # payload: entity=int
EVENT_PICKUP_RELEASED = "pickup_released"          # payload: holder_entity=int, pickup_entity=int, kind=str


# ============================================================================
# TRIGGERS & COMMANDS
# ============================================================================
EVENT_TRIGGER_ACTIVATED = "trigger_activated"      # payload: entity=int
EVENT_TRIGGER_RELEASED = "trigger_released"        # payload: entity=int
EVENT_COMMAND_EXECUTED = "command_executed"        # payload: command=Command, room_entity=int|None


# ============================================================================
# PLAYER & AUDIO
# ============================================================================
EVENT_PLAYER_TELEPORT = "player_teleport"          # payload: direction=Direction, animation=str
EVENT_MUSIC_STOP = "music_stop"                    # payload: None
EVENT_MUSIC_PLAY = "music_play"                    # payload: track=str
EVENT_SOUND_PLAY = "sound_play"                    # payload: effect=str
