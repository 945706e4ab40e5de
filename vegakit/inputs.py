"""Keyboard and mouse state tracking with smoothed movement axes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable

from vegakit.converter import MouseButtonType
from vegakit.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
)
from vegakit.mathutils import Vector2, clamp

__all__ = [
    "Axis",
    "AxisInfo",
    "InputManager",
    "KEY_A",
    "KEY_D",
    "KEY_S",
    "KEY_W",
    "KEY_COUNT",
    "MOUSE_BUTTON_COUNT",
]

# Key codes of the windowing layer.
KEY_A = 0
KEY_D = 3
KEY_S = 18
KEY_W = 22
KEY_COUNT = 101
MOUSE_BUTTON_COUNT = 5

KeyProbe = Callable[[int], bool]
ButtonProbe = Callable[[int], bool]
MouseLocator = Callable[[], tuple[float, float]]


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class AxisInfo:
    """Keys driving one axis and its current smoothed value in [-1, 1]."""

    axis: Axis
    positives: list[int] = field(default_factory=list)
    negatives: list[int] = field(default_factory=list)
    sensi: float = 10.0
    value: float = 0.0

    def add_key(self, positive: bool, code: int) -> None:
        (self.positives if positive else self.negatives).append(code)


class InputManager:
    """Tracks key and mouse button states fed in through ``poll_event``.

    ``key_probe`` and ``button_probe`` report the live state of a key or a
    mouse button; by default they read the states tracked from events.
    ``mouse_locator`` reports the mouse position outside editor mode; by
    default the last position seen in a mouse-moved event is used.
    """

    def __init__(
        self,
        key_probe: KeyProbe | None = None,
        button_probe: ButtonProbe | None = None,
        mouse_locator: MouseLocator | None = None,
    ) -> None:
        self._key_probe = key_probe if key_probe is not None else self.is_key_pressed
        self._button_probe = (
            button_probe if button_probe is not None else self._tracked_button
        )
        self._mouse_locator = mouse_locator
        self._last_mouse = (0.0, 0.0)

        horizontal = AxisInfo(Axis.HORIZONTAL)
        horizontal.add_key(True, KEY_D)
        horizontal.add_key(False, KEY_A)
        vertical = AxisInfo(Axis.VERTICAL)
        vertical.add_key(True, KEY_S)
        vertical.add_key(False, KEY_W)
        self.axes: dict[Axis, AxisInfo] = {
            horizontal.axis: horizontal,
            vertical.axis: vertical,
        }

        self._mouse_states = {button: False for button in range(MOUSE_BUTTON_COUNT)}
        self._prev_mouse_states = dict(self._mouse_states)
        self._key_states = {key: False for key in range(KEY_COUNT)}
        self._prev_key_states = dict(self._key_states)

        self.editor_mode = False
        self.viewport_mouse_pos = (0, 0)
        self.viewport_bounds = (Vector2(), Vector2())

    def update(self, dt: float) -> None:
        """Move every axis value toward its raw direction, or back to rest."""
        for info in self.axes.values():
            raw = self.get_axis_raw(info.axis)
            direction = raw
            if direction == 0.0 and info.value != 0.0:
                direction = -1.0 if info.value > 0.0 else 1.0
            step = direction * info.sensi * dt
            info.value = clamp(info.value + step, -1.0, 1.0)
            if raw == 0.0 and abs(info.value) < abs(step):
                info.value = 0.0

    def poll_event(self, event: Event) -> None:
        if isinstance(event, KeyPressedEvent):
            self._key_states[int(event.keycode)] = True
        elif isinstance(event, KeyReleasedEvent):
            self._key_states[int(event.keycode)] = False
        elif isinstance(event, MouseButtonPressedEvent):
            self._mouse_states[int(event.button)] = True
        elif isinstance(event, MouseButtonReleasedEvent):
            self._mouse_states[int(event.button)] = False
        elif isinstance(event, MouseMovedEvent):
            self._last_mouse = (float(event.x), float(event.y))

    def set_editor_mode(self, enabled: bool) -> None:
        self.editor_mode = enabled

    def set_viewport_mouse_pos(self, x: int, y: int) -> None:
        self.viewport_mouse_pos = (x, y)

    def set_viewport_bounds(self, b1: Vector2, b2: Vector2) -> None:
        self.viewport_bounds = (b1, b2)

    def get_axis_raw(self, axis: Axis) -> float:
        """1 if a positive key is held, else -1 if a negative one is, else 0."""
        info = self.axes.get(axis)
        if info is None:
            return 0.0
        if any(self._key_probe(key) for key in info.positives):
            return 1.0
        if any(self._key_probe(key) for key in info.negatives):
            return -1.0
        return 0.0

    def get_axis(self, axis: Axis) -> float:
        info = self.axes.get(axis)
        return info.value if info is not None else 0.0

    def is_key_pressed(self, key: int) -> bool:
        return self._key_states.get(int(key), False)

    def is_key_released(self, key: int) -> bool:
        return not self.is_key_pressed(key)

    def is_key_down(self, key: int) -> bool:
        """True only on the first query after ``key`` goes from up to held."""
        code = int(key)
        if code not in self._prev_key_states:
            pressed = self.is_key_pressed(code)
            self._prev_key_states[code] = pressed
            return pressed
        if not self._prev_key_states[code] and self.is_key_pressed(code):
            self._prev_key_states[code] = True
            return True
        if self._prev_key_states[code] and self.is_key_released(code):
            self._prev_key_states[code] = False
        return False

    def is_key_combination_pressed(self, keys: Iterable[int]) -> bool:
        return all(self.is_key_pressed(key) for key in keys)

    def is_mouse_down(self, button: MouseButtonType | int) -> bool:
        """True on the first query after ``button`` goes from held to up."""
        code = int(button)
        live = self._button_probe(code)
        if code not in self._prev_mouse_states:
            self._prev_mouse_states[code] = live
            return not live
        previous = self._prev_mouse_states[code]
        if previous and not live:
            self._prev_mouse_states[code] = False
            return True
        if not previous and live:
            self._prev_mouse_states[code] = True
        return False

    def is_mouse_button_pressed(self, button: MouseButtonType | int) -> bool:
        return self._tracked_button(int(button))

    def is_mouse_button_released(self, button: MouseButtonType | int) -> bool:
        return not self.is_mouse_button_pressed(button)

    def mouse_position(self) -> Vector2:
        if self.editor_mode:
            x, y = self.viewport_mouse_pos
        elif self._mouse_locator is not None:
            x, y = self._mouse_locator()
        else:
            x, y = self._last_mouse
        return Vector2(float(x), float(y))

    def _tracked_button(self, code: int) -> bool:
        return self._mouse_states.get(code, False)