"""Conversions between mouse button codes, origin presets and their names."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "MouseButtonType",
    "Origins",
    "mouse_button_from_code",
    "origins_to_string",
    "string_to_origins",
]


class MouseButtonType(IntEnum):
    """Mouse buttons known to the engine."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    XBUTTON1 = 3
    XBUTTON2 = 4


class Origins(IntEnum):
    """Origin presets: top/middle/bottom rows, left/center/right columns."""

    TL = 0
    TC = 1
    TR = 2
    ML = 3
    MC = 4
    MR = 5
    BL = 6
    BC = 7
    BR = 8
    CUSTOM = 9


_ORIGIN_NAMES: dict[Origins, str] = {
    Origins.CUSTOM: "Custom",
    Origins.TL: "TL",
    Origins.TC: "TC",
    Origins.TR: "TR",
    Origins.ML: "ML",
    Origins.MC: "MC",
    Origins.MR: "MR",
    Origins.BL: "BL",
    Origins.BC: "BC",
    Origins.BR: "BR",
}

_ORIGINS_BY_NAME: dict[str, Origins] = {name: origin for origin, name in _ORIGIN_NAMES.items()}


def mouse_button_from_code(code: int) -> MouseButtonType:
    """Map a windowing-layer mouse button code to a MouseButtonType."""
    try:
        return MouseButtonType(int(code))
    except ValueError:
        raise ValueError(f"cannot convert unknown mouse button code {code!r}") from None


def origins_to_string(origin: Origins) -> str:
    """Return the short name of an origin preset, or "Unknown"."""
    try:
        return _ORIGIN_NAMES[Origins(origin)]
    except (ValueError, KeyError):
        return "Unknown"


def string_to_origins(text: str) -> Origins:
    """Parse an origin preset name; unrecognised names give Origins.CUSTOM."""
    return _ORIGINS_BY_NAME.get(text, Origins.CUSTOM)