import math

from vegakit.camera import FloatRect, OrthoCamera
from vegakit.mathutils import Vector2


def test_default_camera_view():
    cam = OrthoCamera()
    assert cam.center == Vector2(500.0, 500.0)
    assert cam.zoom == 1.0
    assert cam.rotation == 0.0
    assert cam.viewport == FloatRect(0.0, 0.0, 1.0, 1.0)


def test_center_and_size_constructor():
    cam = OrthoCamera(Vector2(10.0, 20.0), Vector2(300.0, 200.0))
    assert cam.center == Vector2(10.0, 20.0)
    assert cam.size == Vector2(300.0, 200.0)
    cam.set_zoom(2.0)
    assert cam.size == Vector2(300.0, 200.0) * 2.0


def test_rect_constructor_uses_rect_center_and_size():
    rect = FloatRect(10.0, 20.0, 100.0, 60.0)
    cam = OrthoCamera(rect=rect)
    assert cam.center == rect.center
    assert cam.size == rect.size


def test_zoom_scales_base_size_not_view_size():
    cam = OrthoCamera()
    cam.set_zoom(3.0)
    assert cam.size == Vector2(3.0, 3.0)


def test_set_size_applies_current_zoom():
    cam = OrthoCamera()
    cam.set_zoom(0.5)
    cam.set_size(800.0, 600.0)
    assert cam.size == Vector2(800.0 * 0.5, 600.0 * 0.5)
    cam.set_zoom(1.0)
    assert cam.size == Vector2(800.0, 600.0)


def test_move_accumulates_offsets():
    cam = OrthoCamera()
    cam.set_center(1.0, 2.0)
    cam.move(3.0, -4.0)
    cam.move(-3.0, 4.0)
    assert cam.center == Vector2(1.0, 2.0)


def test_rotation_wraps_into_full_turn():
    cam = OrthoCamera()
    cam.set_rotation(45.0 + 360.0)
    first = cam.rotation
    cam.set_rotation(45.0)
    assert math.isclose(first, cam.rotation)
    cam.set_rotation(-30.0)
    assert 0.0 <= cam.rotation < 360.0


def test_rotate_and_rotate_back():
    cam = OrthoCamera()
    cam.set_rotation(20.0)
    cam.rotate(100.0)
    cam.rotate(-100.0)
    assert math.isclose(cam.rotation, 20.0)


def test_reset_clears_rotation_and_keeps_zoom():
    cam = OrthoCamera()
    cam.set_rotation(30.0)
    cam.set_zoom(2.0)
    rect = FloatRect(0.0, 0.0, 640.0, 480.0)
    cam.reset(rect)
    assert cam.rotation == 0.0
    assert cam.center == rect.center
    assert cam.size == rect.size
    assert cam.zoom == 2.0


def test_set_viewport():
    cam = OrthoCamera()
    port = FloatRect(0.25, 0.25, 0.5, 0.5)
    cam.set_viewport(port)
    assert cam.viewport == port


def test_copy_is_equal_and_independent():
    cam = OrthoCamera(Vector2(5.0, 5.0), Vector2(50.0, 50.0))
    cam.set_zoom(1.5)
    clone = cam.copy()
    assert clone == cam
    clone.move(10.0, 0.0)
    assert cam.center == Vector2(5.0, 5.0)
    assert clone != cam