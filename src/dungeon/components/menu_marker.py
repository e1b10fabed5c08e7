from dataclasses import dataclass


@dataclass(slots=True)
class MenuMarker:
    """Anchor for the title menu drawn inside a room."""
    font: str
