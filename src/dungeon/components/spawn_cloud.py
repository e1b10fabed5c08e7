from dataclasses import dataclass


@dataclass(slots=True)
class SpawnCloud:
    """Hides a freshly placed enemy until the cloud animation finishes."""
    remaining: float
    duration: float

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, 1.0 - self.remaining / self.duration))
