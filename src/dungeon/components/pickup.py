from dataclasses import dataclass


@dataclass(slots=True)
class Pickup:
    kind: str
    # Player raises the item overhead when collecting it.
    holds_up: bool = False
    upgraded: bool = False
    value: int = 0
