"""
Particle state and physics for the sling-bounce demo.

A single particle lives inside a circular boundary. Each tick it moves by its
(integer-truncated) velocity, picks up gravity, and bounces off the boundary.
Every fresh bounce makes it 2 px bigger. Dragging moves it around; letting go
flings it opposite to the drag, like a sling-shot.

Units are pixels and pixels per tick.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

# Boundary: circle drawn in the box (0, 0)-(400, 400)
BOUNDARY_CENTER = (200, 200)
BOUNDARY_RADIUS = 200

INITIAL_SIZE = 10
GROWTH = 2
LAUNCH_DIVISOR = 10.0
MIN_NORMAL_LENGTH = 1e-9


def round_half_up(value: float, digits: int = 1) -> float:
    scale = 10 ** digits
    # + 0.0 turns -0.0 into 0.0
    return math.floor(value * scale + 0.5) / scale + 0.0


@dataclass
class Particle:
    x: int = BOUNDARY_CENTER[0]
    y: int = BOUNDARY_CENTER[1]
    vx: float = 0.0
    vy: float = 0.0
    size: int = INITIAL_SIZE
    is_colliding: bool = False
    drag_anchor: Optional[Tuple[int, int]] = None

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def velocity(self) -> Tuple[float, float]:
        return (self.vx, self.vy)

    @property
    def is_dragging(self) -> bool:
        return self.drag_anchor is not None

    def distance_from_center(self, center=BOUNDARY_CENTER) -> float:
        return math.hypot(self.x - center[0], self.y - center[1])

    def update(self, gravity: float, center=BOUNDARY_CENTER, radius=BOUNDARY_RADIUS) -> bool:
        """
        Advance one tick. Returns True if this tick started a new collision.

        Reflection and growth only fire on the transition into the colliding
        state; while the particle stays outside on later ticks nothing happens,
        otherwise it would keep flipping its velocity back and forth.
        """
        # position moves in whole pixels
        self.x += int(self.vx)
        self.y += int(self.vy)

        self.vy += gravity

        distance = self.distance_from_center(center)
        if distance <= radius - self.size / 2.0:
            self.is_colliding = False
            return False

        if self.is_colliding:
            return False

        if distance >= MIN_NORMAL_LENGTH:
            # outward normal from the center to the particle
            nx = (self.x - center[0]) / distance
            ny = (self.y - center[1]) / distance
            dot = self.vx * nx + self.vy * ny
            self.vx -= 2 * dot * nx
            self.vy -= 2 * dot * ny

        self.size += GROWTH
        self.is_colliding = True
        return True

    def drag_to(self, x: int, y: int):
        """Move the particle to the pointer, remembering where the drag began."""
        if self.drag_anchor is None:
            self.drag_anchor = self.position
        self.x = x
        self.y = y

    def release_at(self, x: int, y: int) -> bool:
        """
        Fling the particle opposite to the drag.

        Launch velocity is (anchor - release) / 10. A release with no drag in
        progress (plain click) is ignored and returns False.
        """
        if self.drag_anchor is None:
            return False
        ax, ay = self.drag_anchor
        self.vx = (ax - x) / LAUNCH_DIVISOR
        self.vy = (ay - y) / LAUNCH_DIVISOR
        self.drag_anchor = None
        return True

    def reset_size(self):
        self.size = INITIAL_SIZE

    def readout(self) -> Tuple[float, float]:
        # screen y grows downward; show "up" as positive
        return (round_half_up(self.vx), -round_half_up(self.vy) + 0.0)


def acceleration_readout(gravity: float) -> Tuple[float, float]:
    return (0.0, -round_half_up(gravity) + 0.0)
