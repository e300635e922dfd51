# naviz

`naviz` holds the building blocks for visualizing neutral-atom quantum
computations: the data model of instructions, machines and styles, the scene
description handed to a renderer, RGBA colour compositing, 2D positions, the
layout of a fixed-aspect drawing area, and the state behind a viewer's menu,
playback controls and video-export dialogs.

It has no runtime dependencies.

## Install

```
pip install naviz
```

To run the tests:

```
pip install "naviz[test]"
pytest
```

## Modules

- `naviz.model` – frozen dataclasses for
  - instructions: `Load`, `Store`, `Move`, `Rz`, `Ry`, `Cz`, `SetupAtom`,
    `InstructionGroup` and `Instructions` (whose timed entries are kept sorted
    by time);
  - the machine: `MachineZone`, `MachineTrap`, `MachineTiming`,
    `MachineConfig`;
  - the style: `FontStyle`, `LineStyle`, `ZoneStyle`, `OperationStyle`
    (with `radius_for(atom_radius)`) and `VisualConfig`, which compiles
    string patterns in `atom_names` and `zone_styles` and rejects invalid
    number positions;
  - the scene: `SceneConfig`, `SceneMachineConfig`, `GridConfig`,
    `GridLegendConfig`, `TrapConfig`, `ZoneConfig`, `AtomsConfig`,
    `LegendConfig`, `LegendSection`, `LegendEntry`, `TimeConfig`,
    `FontConfig`, `LineConfig`, and the per-moment `State` of `AtomState`s.
- `naviz.color` – `Color`, an immutable RGBA value with 8-bit channels,
  `over(base)` alpha compositing, saturating `+` and scaling by a float with
  `*`.
- `naviz.position` – `Position` with `from_pair`, `as_tuple`, `+` and `*`.
- `naviz.floats` – `to_float(value)`, which turns a `Fraction` (or any real
  number) into a float, giving signed infinity for values too large.
- `naviz.playback` – `PlaybackClock`: animation time that `advance(delta)`
  moves by `speed` unless paused, `toggle_pause()`, `seek(time)` clamped to
  `0 .. duration`, `set_speed(speed)` clamped to `0 .. MAX_SPEED`, plus the
  button `icon` and `speed_label`.
- `naviz.layout` – `AspectPanel(space, aspect_ratio, top, bottom, left,
  right).layout()` returns a `PanelLayout` of `Rect`s for the content and the
  four side strips; `constrain_to_aspect(width, height, aspect)` does the
  fitting.
- `naviz.current_machine` – `CurrentMachine.none()`, `.manual()`,
  `.with_id(id)` and `compatible_with(ids)`.
- `naviz.export` – `ExportSettings` (`show()`, `accept()`), and
  `ExportProgress` / `ExportProgresses`, which track render and encode
  progress through `on_render`, `on_encode`, `on_done` and `on_disconnect`
  and give a final `message()`.
- `naviz.menu` – `FileType` (names and extensions `naviz`, `namachine`,
  `nastyle`), the menu events `FileOpen`, `SetMachine`, `SetStyle`,
  `ImportMachine`, `ImportStyle`, `ExportVideo`, and `MenuState`, which keeps
  the sorted machine and style lists, detects file types by extension, handles
  pasted text and queues events for `poll_event()`. `version_string` builds
  the displayed program version.

## Examples

```python
from naviz.color import Color

Color(255, 0, 0, 128).over(Color(0, 0, 255, 255))
# Color(r=128, g=0, b=127, a=255)
```

```python
from naviz.layout import AspectPanel, Rect

panel = AspectPanel(Rect(0, 0, 1920, 1100), 16 / 9, bottom=20)
rects = panel.layout()
print(rects.content, rects.bottom)
```

```python
from naviz.menu import FileOpen, FileType, MenuState

menu = MenuState(import_formats={"MQT NA": ["na"]})
menu.load_file_by_extension("circuit.naviz", b"...")
event = menu.poll_event()
assert isinstance(event, FileOpen) and event.file_type is FileType.INSTRUCTIONS
```

## What it does not do

The package describes inputs and scenes but does not compute an animation:
there is no component that turns `Instructions`, a `MachineConfig` and a
`VisualConfig` into a `SceneConfig` or a `State` over time, and no
interpolation of values between keyframes. It does not parse instruction,
machine or style files — opened files are passed on as raw bytes in
`FileOpen` events. It draws nothing, opens no window, encodes no video and
keeps no repository of machines or styles; the menu and export classes only
hold the state such a viewer needs.