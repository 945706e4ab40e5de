"""Blocking engine events and a dispatcher that routes them by type."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto
from typing import Callable, ClassVar, TypeVar

from vegakit.converter import MouseButtonType

__all__ = [
    "EventType",
    "EventCategory",
    "Event",
    "WindowResizeEvent",
    "WindowCloseEvent",
    "AppTickEvent",
    "AppUpdateEvent",
    "AppRenderEvent",
    "KeyEvent",
    "KeyPressedEvent",
    "KeyReleasedEvent",
    "KeyTypedEvent",
    "MouseMovedEvent",
    "MouseScrolledEvent",
    "MouseButtonEvent",
    "MouseButtonPressedEvent",
    "MouseButtonReleasedEvent",
    "EventDispatcher",
]


def _num(value: float) -> str:
    return f"{value:g}"


class EventType(IntEnum):
    NONE = 0
    WINDOW_CLOSE = auto()
    WINDOW_RESIZE = auto()
    WINDOW_FOCUS = auto()
    WINDOW_LOST_FOCUS = auto()
    WINDOW_MOVED = auto()
    APP_TICK = auto()
    APP_UPDATE = auto()
    APP_RENDER = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    KEY_TYPED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    MOUSE_MOVED = auto()
    MOUSE_SCROLLED = auto()


class EventCategory(IntFlag):
    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


class Event:
    """Base of all events; ``handled`` is set by the dispatcher."""

    event_type: ClassVar[EventType] = EventType.NONE
    name: ClassVar[str] = "None"
    category: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        self.handled = False

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category & category)

    def __str__(self) -> str:
        return self.name


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    name = "WindowResize"
    category = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    name = "WindowClose"
    category = EventCategory.APPLICATION


class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    name = "AppTick"
    category = EventCategory.APPLICATION


class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    name = "AppUpdate"
    category = EventCategory.APPLICATION


class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    name = "AppRender"
    category = EventCategory.APPLICATION


class KeyEvent(Event):
    """Base of keyboard events."""

    category = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, keycode: int) -> None:
        super().__init__()
        self.keycode = keycode


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED
    name = "KeyPressed"

    def __init__(self, keycode: int, repeat_count: int = 0) -> None:
        super().__init__(keycode)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.keycode} ({self.repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED
    name = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.keycode}"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED
    name = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.keycode}"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    name = "MouseMoved"
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    name = "MouseScrolled"
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = x_offset
        self.y_offset = y_offset

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, button: MouseButtonType) -> None:
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED
    name = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED
    name = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Hands an event to a handler when the event is of the handler's type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        if self.event.event_type != event_class.event_type:
            return False
        self.event.handled = bool(func(self.event))  # type: ignore[arg-type]
        return True