"""Easing functions mapping linear progress in [0, 1] to eased progress."""

import math
from typing import Callable

EasingFunction = Callable[[float], float]


def linear(t: float) -> float:
    return t


def smooth(t: float) -> float:
    """Smoothstep: zero velocity at both ends."""
    return t * t * (3 - 2 * t)


def double_smooth(t: float) -> float:
    if t < 0.5:
        return 0.5 * smooth(2 * t)
    return 0.5 * (1 + smooth(2 * t - 1))


def rush_into(t: float) -> float:
    return 2 * smooth(t / 2)


def rush_from(t: float) -> float:
    return 2 * smooth(t / 2 + 0.5) - 1


def there_and_back(t: float) -> float:
    """Go to 1 at the midpoint and come back to 0."""
    new_t = 2 * t if t < 0.5 else 2 * (1 - t)
    return smooth(new_t)


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


def ease_in_cubic(t: float) -> float:
    return t**3


def ease_out_cubic(t: float) -> float:
    return (t - 1) ** 3 + 1


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t**3
    return (t - 1) * (2 * t - 2) ** 2 + 1


def ease_in_sine(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def _bounce_out(t: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if t < 1 / d1:
        return n1 * t * t
    if t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1 - _bounce_out(1 - t)


def ease_out_bounce(t: float) -> float:
    """Settle on 1 with a series of decaying bounces."""
    return _bounce_out(t)


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return (1 - _bounce_out(1 - 2 * t)) / 2
    return (1 + _bounce_out(2 * t - 1)) / 2


BUILTIN_EASINGS: dict[str, EasingFunction] = {
    "linear": linear,
    "smooth": smooth,
    "double_smooth": double_smooth,
    "rush_into": rush_into,
    "rush_from": rush_from,
    "there_and_back": there_and_back,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_in_sine": ease_in_sine,
    "ease_out_sine": ease_out_sine,
    "ease_in_out_sine": ease_in_out_sine,
    "ease_in_bounce": ease_in_bounce,
    "ease_out_bounce": ease_out_bounce,
    "ease_in_out_bounce": ease_in_out_bounce,
}


class EasingRegistry:
    """Name to easing function lookup.

    Registries are created explicitly and passed where needed; there is no
    shared module-level instance.
    """

    def __init__(self) -> None:
        self._easings: dict[str, EasingFunction] = {}

    @classmethod
    def with_builtins(cls) -> "EasingRegistry":
        registry = cls()
        for name, fn in BUILTIN_EASINGS.items():
            registry.register(name, fn)
        return registry

    def register(self, name: str, fn: EasingFunction) -> None:
        """
        Register an easing under a name.

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._easings:
            raise ValueError(f"Easing '{name}' is already registered")
        self._easings[name] = fn

    def get(self, name: str) -> EasingFunction | None:
        return self._easings.get(name)

    def has(self, name: str) -> bool:
        return name in self._easings

    def unregister(self, name: str) -> bool:
        """Remove an easing. Returns whether it was registered."""
        return self._easings.pop(name, None) is not None

    def clear(self) -> None:
        self._easings.clear()

    def names(self) -> tuple[str, ...]:
        return tuple(self._easings)
