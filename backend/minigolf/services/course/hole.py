import math
from typing import Dict, Optional

HOLE_POSITION = {'x': 750, 'y': 100}
HOLE_RADIUS = 25


class Hole:
    def __init__(self, x=HOLE_POSITION['x'], y=HOLE_POSITION['y'], radius=HOLE_RADIUS):
        self.x = x
        self.y = y
        self.radius = radius

    def distance(self, position: Dict[str, float]) -> float:
        return math.hypot(position['x'] - self.x, position['y'] - self.y)

    def is_completed(self, position: Dict[str, float]) -> bool:
        """True when the ball lies strictly inside the cup radius."""
        return self.distance(position) < self.radius


def distance_to_hole(position: Dict[str, float], hole: Optional[Hole] = None) -> float:
    return (hole or Hole()).distance(position)


def is_hole_completed(position: Dict[str, float], hole: Optional[Hole] = None) -> bool:
    return (hole or Hole()).is_completed(position)
