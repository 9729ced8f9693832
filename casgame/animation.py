"""Eased movement between two grid positions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable

from casgame.grid import GridTransform, Vec3


class EaseFunction(Enum):
    """Easing curves mapping progress in [0, 1] to [0, 1]."""

    LINEAR = auto()
    QUADRATIC_IN = auto()
    QUADRATIC_OUT = auto()
    QUADRATIC_IN_OUT = auto()
    CUBIC_IN = auto()
    CUBIC_OUT = auto()
    CUBIC_IN_OUT = auto()
    SINE_IN = auto()
    SINE_OUT = auto()
    SINE_IN_OUT = auto()
    SMOOTH_STEP = auto()
    SMOOTHER_STEP = auto()


def _quad_in_out(t: float) -> float:
    return 2.0 * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


def _cubic_in_out(t: float) -> float:
    return 4.0 * t**3 if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


_CURVES: dict[EaseFunction, Callable[[float], float]] = {
    EaseFunction.LINEAR: lambda t: t,
    EaseFunction.QUADRATIC_IN: lambda t: t * t,
    EaseFunction.QUADRATIC_OUT: lambda t: 1.0 - (1.0 - t) ** 2,
    EaseFunction.QUADRATIC_IN_OUT: _quad_in_out,
    EaseFunction.CUBIC_IN: lambda t: t**3,
    EaseFunction.CUBIC_OUT: lambda t: 1.0 - (1.0 - t) ** 3,
    EaseFunction.CUBIC_IN_OUT: _cubic_in_out,
    EaseFunction.SINE_IN: lambda t: 1.0 - math.cos(t * math.pi / 2.0),
    EaseFunction.SINE_OUT: lambda t: math.sin(t * math.pi / 2.0),
    EaseFunction.SINE_IN_OUT: lambda t: -(math.cos(math.pi * t) - 1.0) / 2.0,
    EaseFunction.SMOOTH_STEP: lambda t: t * t * (3.0 - 2.0 * t),
    EaseFunction.SMOOTHER_STEP: lambda t: t**3 * (t * (6.0 * t - 15.0) + 10.0),
}


def ease(function: EaseFunction, t: float) -> float:
    """Apply an easing curve to progress `t`, clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return _CURVES[function](t)


@dataclass
class TransformAnimation:
    """Eases an object from `old_transform` to its current grid position.

    `duration` and `progress` are in seconds; a zero duration means idle.
    """

    old_transform: GridTransform = field(default_factory=GridTransform)
    duration: float = 0.0
    progress: float = 0.0
    function: EaseFunction = EaseFunction.LINEAR

    def is_idle(self) -> bool:
        """Return True if no animation is running."""
        return self.duration == 0.0

    def start(self, old_transform: GridTransform, duration: float) -> None:
        """Begin easing from `old_transform` over `duration` seconds."""
        if duration < 0:
            raise ValueError("animation duration must not be negative")
        self.old_transform = GridTransform(
            translation=old_transform.translation, rotation=old_transform.rotation
        )
        self.duration = float(duration)
        self.progress = 0.0

    def advance(self, delta: float, target: GridTransform, z: float) -> Vec3:
        """Step the animation by `delta` seconds and return the world position."""
        if self.is_idle():
            return target.as_vec3_with_z(z)

        self.progress += delta
        t = min(max(self.progress / self.duration, 0.0), 1.0)
        e = ease(self.function, t)

        start = self.old_transform.as_vec3_with_z(z)
        end = target.as_vec3_with_z(z)
        x, y, zz = (a + (b - a) * e for a, b in zip(start, end))

        if self.progress >= self.duration:
            self.duration = 0.0
            self.progress = 0.0

        return (x, y, zz)