import pytest

from vegakit.converter import MouseButtonType
from vegakit.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
)
from vegakit.inputs import (
    KEY_A,
    KEY_D,
    KEY_S,
    KEY_W,
    Axis,
    AxisInfo,
    InputManager,
)
from vegakit.mathutils import Vector2


def press(manager, key):
    manager.poll_event(KeyPressedEvent(key))


def release(manager, key):
    manager.poll_event(KeyReleasedEvent(key))


def test_axis_info_add_key():
    info = AxisInfo(Axis.HORIZONTAL)
    info.add_key(True, 7)
    info.add_key(False, 8)
    info.add_key(True, 9)
    assert info.positives == [7, 9]
    assert info.negatives == [8]
    assert info.sensi == 10.0
    assert info.value == 0.0


def test_default_axis_bindings():
    manager = InputManager()
    assert manager.axes[Axis.HORIZONTAL].positives == [KEY_D]
    assert manager.axes[Axis.HORIZONTAL].negatives == [KEY_A]
    assert manager.axes[Axis.VERTICAL].positives == [KEY_S]
    assert manager.axes[Axis.VERTICAL].negatives == [KEY_W]


def test_key_pressed_and_released_follow_events():
    manager = InputManager()
    assert manager.is_key_released(KEY_D)
    press(manager, KEY_D)
    assert manager.is_key_pressed(KEY_D)
    assert not manager.is_key_released(KEY_D)
    release(manager, KEY_D)
    assert not manager.is_key_pressed(KEY_D)


def test_unknown_key_is_not_pressed():
    manager = InputManager()
    assert manager.is_key_pressed(5000) is False


def test_is_key_down_fires_once_per_press():
    manager = InputManager()
    press(manager, KEY_W)
    assert manager.is_key_down(KEY_W) is True
    assert manager.is_key_down(KEY_W) is False
    release(manager, KEY_W)
    assert manager.is_key_down(KEY_W) is False
    press(manager, KEY_W)
    assert manager.is_key_down(KEY_W) is True


def test_is_key_down_for_untracked_key():
    manager = InputManager()
    press(manager, 500)
    assert manager.is_key_down(500) is True
    assert manager.is_key_down(500) is False


def test_key_combination():
    manager = InputManager()
    press(manager, KEY_A)
    assert not manager.is_key_combination_pressed([KEY_A, KEY_S])
    press(manager, KEY_S)
    assert manager.is_key_combination_pressed([KEY_A, KEY_S])
    assert manager.is_key_combination_pressed([])


def test_axis_raw():
    manager = InputManager()
    assert manager.get_axis_raw(Axis.HORIZONTAL) == 0.0
    press(manager, KEY_A)
    assert manager.get_axis_raw(Axis.HORIZONTAL) == -1.0
    press(manager, KEY_D)
    assert manager.get_axis_raw(Axis.HORIZONTAL) == 1.0
    press(manager, KEY_S)
    assert manager.get_axis_raw(Axis.VERTICAL) == 1.0


def test_axis_raw_uses_key_probe():
    held = {KEY_W}
    manager = InputManager(key_probe=lambda key: key in held)
    assert manager.get_axis_raw(Axis.VERTICAL) == -1.0
    assert manager.get_axis_raw(Axis.HORIZONTAL) == 0.0


def test_update_saturates_axis():
    manager = InputManager()
    press(manager, KEY_D)
    for _ in range(50):
        manager.update(0.1)
    assert manager.get_axis(Axis.HORIZONTAL) == 1.0
    assert manager.get_axis(Axis.VERTICAL) == 0.0


def test_update_moves_partially_and_stays_in_range():
    manager = InputManager()
    press(manager, KEY_A)
    manager.update(0.01)
    value = manager.get_axis(Axis.HORIZONTAL)
    assert -1.0 < value < 0.0
    manager.update(0.01)
    assert manager.get_axis(Axis.HORIZONTAL) < value


def test_axis_returns_to_rest_after_release():
    manager = InputManager()
    press(manager, KEY_D)
    for _ in range(20):
        manager.update(0.1)
    release(manager, KEY_D)
    previous = manager.get_axis(Axis.HORIZONTAL)
    for _ in range(200):
        manager.update(0.03)
        current = manager.get_axis(Axis.HORIZONTAL)
        assert 0.0 <= current <= previous
        previous = current
    assert manager.get_axis(Axis.HORIZONTAL) == 0.0


def test_mouse_button_states():
    manager = InputManager()
    assert manager.is_mouse_button_released(MouseButtonType.LEFT)
    manager.poll_event(MouseButtonPressedEvent(MouseButtonType.LEFT))
    assert manager.is_mouse_button_pressed(MouseButtonType.LEFT)
    assert not manager.is_mouse_button_pressed(MouseButtonType.RIGHT)
    manager.poll_event(MouseButtonReleasedEvent(MouseButtonType.LEFT))
    assert manager.is_mouse_button_released(MouseButtonType.LEFT)


def test_is_mouse_down_fires_on_release():
    manager = InputManager()
    assert manager.is_mouse_down(MouseButtonType.LEFT) is False
    manager.poll_event(MouseButtonPressedEvent(MouseButtonType.LEFT))
    assert manager.is_mouse_down(MouseButtonType.LEFT) is False
    manager.poll_event(MouseButtonReleasedEvent(MouseButtonType.LEFT))
    assert manager.is_mouse_down(MouseButtonType.LEFT) is True
    assert manager.is_mouse_down(MouseButtonType.LEFT) is False


def test_is_mouse_down_untracked_button():
    manager = InputManager(button_probe=lambda button: False)
    assert manager.is_mouse_down(42) is True
    assert manager.is_mouse_down(42) is False


def test_mouse_position_editor_mode():
    manager = InputManager(mouse_locator=lambda: (5.0, 6.0))
    manager.set_viewport_mouse_pos(12, 34)
    assert manager.mouse_position() == Vector2(5.0, 6.0)
    manager.set_editor_mode(True)
    assert manager.mouse_position() == Vector2(12.0, 34.0)
    manager.set_editor_mode(False)
    assert manager.mouse_position() == Vector2(5.0, 6.0)


def test_mouse_position_from_moves():
    manager = InputManager()
    assert manager.mouse_position() == Vector2(0.0, 0.0)
    manager.poll_event(MouseMovedEvent(3.5, 7.25))
    assert manager.mouse_position() == Vector2(3.5, 7.25)


def test_viewport_bounds_stored():
    manager = InputManager()
    b1, b2 = Vector2(1.0, 2.0), Vector2(3.0, 4.0)
    manager.set_viewport_bounds(b1, b2)
    assert manager.viewport_bounds == (b1, b2)


@pytest.mark.parametrize("axis", list(Axis))
def test_axis_starts_at_rest(axis):
    manager = InputManager()
    assert manager.get_axis(axis) == 0.0
    manager.update(0.5)
    assert manager.get_axis(axis) == 0.0