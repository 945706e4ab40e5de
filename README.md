# vegakit

This package provides building blocks for a small 2D game engine. It is plain
Python and has no third-party dependencies.

## Modules

- `vegakit.events` defines the event classes. These cover the window
  (`WindowResizeEvent`, `WindowCloseEvent`), the application (`AppTickEvent`,
  `AppUpdateEvent`, `AppRenderEvent`), the keyboard (`KeyPressedEvent`,
  `KeyReleasedEvent`, `KeyTypedEvent`) and the mouse (`MouseMovedEvent`,
  `MouseScrolledEvent`, `MouseButtonPressedEvent`, `MouseButtonReleasedEvent`).
  - Each event has an `EventType` and `EventCategory` flags.
  - `Event.is_in_category` tests the category flags.
  - `EventDispatcher.dispatch(event_class, func)` calls `func` only when the
    event has that class's type. It stores the result in `event.handled` and
    returns whether it made the call.
- `vegakit.inputs` provides `InputManager`, which tracks the state of keys and
  mouse buttons from the events passed to `poll_event`.
  - `is_key_pressed`, `is_key_released` and `is_key_combination_pressed` report
    whether keys are currently held.
  - `is_key_down` fires once when a key goes down.
  - `is_mouse_down` fires once when a mouse button is released.
  - `get_axis_raw` and `get_axis` read the `Axis.HORIZONTAL` (D/A) and
    `Axis.VERTICAL` (S/W) axes. `update(dt)` smooths them.
  - `mouse_position` returns the viewport position in editor mode. Otherwise
    it returns the value from a supplied locator or the last mouse-moved
    event.
  - You can inject callables that probe the live state of keys and buttons.
- `vegakit.camera` provides `OrthoCamera`, which has a center, size, rotation,
  viewport (`FloatRect`) and zoom. The zoom scales the base size set with
  `set_size`. The camera also offers `move`, `rotate`, `reset` and `copy`.
- `vegakit.mathutils` provides a frozen `Vector2` and functions that work on
  it:
  - `clamp`, `clamp01`, `lerp`, `lerp_vector`, `lerp_color`;
  - `magnitude`, `get_normal`, `normal_vector`, `dot`, `cross`;
  - angle conversions, `project_on_slope`, `rotate_vector`;
  - `origin_offset` for origin presets;
  - `pixel_to_meter` and `meter_to_pixel`, at 100 pixels per meter;
  - `is_equal`, which uses single-precision epsilon;
  - `can_file_open`.
- `vegakit.converter` defines the `MouseButtonType` and `Origins` enums.
  - `mouse_button_from_code` converts a code to a `MouseButtonType` and raises
    `ValueError` for unknown codes.
  - `origins_to_string` and `string_to_origins` convert between `Origins` and
    names. Unknown names become `Origins.CUSTOM`.
- `vegakit.uuids` provides `Uuid`, a 16-byte value that can be ordered and
  hashed.
  - `from_string` accepts optional dashes and braces and raises `ValueError`
    on bad input. `is_valid` checks text without raising.
  - `variant`, `version` and `is_nil` inspect the value.
  - The module also defines the standard `NAMESPACE_*` constants.
- `vegakit.uuidgen` generates identifiers:
  - `random_uuid(rng)` makes a version 4 identifier.
  - `name_uuid(namespace, name)` makes a version 5, SHA-1 based identifier.
- `vegakit.randomness` provides `RandomSource`, which you can seed. It returns
  integers, floats and booleans. It also returns points on the unit circle
  and random directions in a range of degrees. Its `uuid()` method returns
  version 4 identifiers as text.
- `vegakit.resources` provides `ResourceManager`, a cache that loads entries
  through a loader function on first `get`. `save`, `load`, `unload` and
  `unload_all` manage the cache. `ResourceManager.instance(name, loader)`
  returns a shared manager for that name.
- `vegakit.fzlog` provides `Logger`, which writes timestamped, ANSI-coloured
  lines at the levels given by `Level`. `format_message` replaces `{0}`, `{1}`
  and so on with the arguments.

## Example

```python
from vegakit.events import EventDispatcher, KeyPressedEvent
from vegakit.uuids import Uuid

event = KeyPressedEvent(3, 1)
dispatcher = EventDispatcher(event)
dispatcher.dispatch(KeyPressedEvent, lambda e: True)
print(event.handled)  # True
print(str(event))     # KeyPressedEvent: 3 (1 repeats)

uid = Uuid.from_string("47183823-2574-4bfd-b411-99ed177d3e43")
print(uid.version())  # UuidVersion.RANDOM_NUMBER_BASED
```

## What it does not do

The package does not:

- open windows or draw anything;
- play sounds;
- simulate physics;
- read input from the operating system.

Your application must create the events and pass them to
`InputManager.poll_event`. The package has no command-line program and no
game loop.

## Running the tests

```
pip install -e .[test]
pytest
```