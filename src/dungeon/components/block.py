from dataclasses import dataclass


@dataclass(slots=True)
class Block:
    kind: str
    pushable: bool = False
