from dataclasses import dataclass

@dataclass(slots=True)
class SpinAnimation:
    """Rotation of a selected token; damping > 0 winds the spin down."""
    velocity: float
    damping: float = 0.0
    angle: float = 0.0  # radians
