"""Data model: instructions, machine and style inputs, and the rendered scene.

The input side (instructions, :class:`MachineConfig`, :class:`VisualConfig`)
uses exact :class:`~fractions.Fraction` values. The scene side
(:class:`SceneConfig`, :class:`State`) uses floats and RGBA tuples, ready
for drawing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, Optional, Pattern, Union

from .color import Color

Number = Union[Fraction, int]
Point = tuple[Number, Number]
FloatPoint = tuple[float, float]
Rgba = tuple[int, int, int, int]

VERTICAL_POSITIONS = ("top", "bottom")
HORIZONTAL_POSITIONS = ("left", "right")


def _check_choice(value: str, choices: tuple[str, ...], what: str) -> None:
    if value not in choices:
        raise ValueError(f"invalid {what}: {value!r} (expected one of {', '.join(choices)})")


def _compile_rules(rules: Iterable[tuple[Union[str, Pattern[str]], object]]) -> tuple:
    return tuple(
        (re.compile(pattern) if isinstance(pattern, str) else pattern, value)
        for pattern, value in rules
    )


# --- instructions ---------------------------------------------------------


@dataclass(frozen=True)
class Load:
    """Load an atom into the shuttle, optionally moving it to ``position``."""

    id: str
    position: Optional[Point] = None


@dataclass(frozen=True)
class Store:
    """Store an atom back into a trap, optionally moving it to ``position``."""

    id: str
    position: Optional[Point] = None


@dataclass(frozen=True)
class Move:
    """Move an atom to ``position``."""

    id: str
    position: Point


@dataclass(frozen=True)
class Rz:
    """Z rotation on atoms or zones named in ``targets``."""

    targets: tuple[str, ...]
    value: Number = Fraction(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", tuple(self.targets))


@dataclass(frozen=True)
class Ry:
    """Y rotation on atoms or zones named in ``targets``."""

    targets: tuple[str, ...]
    value: Number = Fraction(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", tuple(self.targets))


@dataclass(frozen=True)
class Cz:
    """Controlled-Z on close atom pairs among ``targets``."""

    targets: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", tuple(self.targets))


TimedInstruction = Union[Load, Store, Move, Rz, Ry, Cz]


@dataclass(frozen=True)
class SetupAtom:
    """An atom present from the start at ``position``."""

    id: str
    position: Point


@dataclass(frozen=True)
class InstructionGroup:
    """Instructions started together.

    Unless ``variable`` is set, every instruction takes as long as the
    longest one in the group.
    """

    instructions: tuple[TimedInstruction, ...]
    variable: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "instructions", tuple(self.instructions))


@dataclass(frozen=True)
class Instructions:
    """A complete visualisation input.

    ``instructions`` is a sequence of ``(time, groups)`` entries, where each
    group is ``(from_start, offset, InstructionGroup)``: ``offset`` is added to
    the start time, and ``from_start`` says whether the next group starts
    together with this one instead of after it. Entries are kept sorted by time.
    """

    setup: tuple[SetupAtom, ...] = ()
    instructions: tuple[tuple[Number, tuple[tuple[bool, Number, InstructionGroup], ...]], ...] = ()
    targets: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "setup", tuple(self.setup))
        object.__setattr__(self, "targets", tuple(self.targets))
        entries = [(time, tuple(groups)) for time, groups in self.instructions]
        entries.sort(key=lambda entry: entry[0])
        object.__setattr__(self, "instructions", tuple(entries))


# --- machine --------------------------------------------------------------


@dataclass(frozen=True)
class MachineZone:
    """A rectangular zone from ``start`` (top left) to ``end`` (bottom right)."""

    start: Point
    end: Point


@dataclass(frozen=True)
class MachineTrap:
    position: Point


@dataclass(frozen=True)
class MachineTiming:
    """Durations of the fixed-length operations and the time unit."""

    load: Number = Fraction(0)
    store: Number = Fraction(0)
    rz: Number = Fraction(0)
    ry: Number = Fraction(0)
    cz: Number = Fraction(0)
    unit: str = ""


@dataclass(frozen=True)
class MachineConfig:
    """A machine: its zones, traps, timings and physical limits."""

    zones: dict[str, MachineZone] = field(default_factory=dict)
    traps: dict[str, MachineTrap] = field(default_factory=dict)
    timing: MachineTiming = field(default_factory=MachineTiming)
    interaction_distance: Number = Fraction(0)
    max_speed: Number = Fraction(1)


# --- style ----------------------------------------------------------------


@dataclass(frozen=True)
class FontStyle:
    size: Number = Fraction(12)
    color: Color = field(default_factory=lambda: Color(0, 0, 0, 255))
    family: str = ""


@dataclass(frozen=True)
class LineStyle:
    """A (possibly dashed) line; ``dash_duty`` is the drawn share of a segment."""

    thickness: Number = Fraction(0)
    dash_length: Number = Fraction(0)
    dash_duty: Number = Fraction(1)


@dataclass(frozen=True)
class ZoneStyle:
    color: Color = field(default_factory=Color)
    line: LineStyle = field(default_factory=LineStyle)
    name: str = ""


@dataclass(frozen=True)
class OperationStyle:
    """How atoms look during an operation.

    ``radius`` is absolute, or a factor of the atom radius when ``relative``.
    """

    name: str = ""
    color: Color = field(default_factory=Color)
    radius: Number = Fraction(1)
    relative: bool = True

    def radius_for(self, atom_radius: Number) -> Fraction:
        """The radius used for an atom whose normal radius is ``atom_radius``."""
        if self.relative:
            return Fraction(self.radius) * Fraction(atom_radius)
        return Fraction(self.radius)


@dataclass(frozen=True)
class VisualConfig:
    """A style: how machine, atoms, legend and time are drawn.

    ``atom_names`` and ``zone_styles`` are ordered ``(pattern, value)`` rules;
    patterns given as strings are compiled.
    """

    atom_radius: Number = Fraction(1)
    atom_names: tuple[tuple[Pattern[str], str], ...] = ()
    atom_label_font: FontStyle = field(default_factory=FontStyle)
    trapped_color: Color = field(default_factory=lambda: Color(0, 0, 0, 255))
    shuttling_color: Color = field(default_factory=lambda: Color(0, 0, 0, 255))

    margin: Number = Fraction(0)
    tick_x: Number = Fraction(1)
    tick_y: Number = Fraction(1)
    tick_line: LineStyle = field(default_factory=LineStyle)
    tick_color: Color = field(default_factory=Color)
    number_x_distance: Number = Fraction(1)
    number_y_distance: Number = Fraction(1)
    number_x_position: str = "bottom"
    number_y_position: str = "left"
    number_font: FontStyle = field(default_factory=FontStyle)
    axis_x_label: str = "x"
    axis_y_label: str = "y"

    trap_name: str = ""
    trap_radius: Number = Fraction(1)
    trap_line_width: Number = Fraction(0)
    trap_color: Color = field(default_factory=Color)
    shuttle_name: str = ""
    shuttle_line: LineStyle = field(default_factory=LineStyle)
    shuttle_color: Color = field(default_factory=Color)
    machine_legend_display: bool = False
    machine_legend_title: str = ""

    zone_styles: tuple[tuple[Pattern[str], ZoneStyle], ...] = ()
    zone_legend_display: bool = False
    zone_legend_title: str = ""

    rz: OperationStyle = field(default_factory=OperationStyle)
    ry: OperationStyle = field(default_factory=OperationStyle)
    cz: OperationStyle = field(default_factory=OperationStyle)
    operation_legend_display: bool = False
    operation_legend_title: str = ""

    sidebar_font: FontStyle = field(default_factory=FontStyle)
    sidebar_heading_padding: Number = Fraction(0)
    sidebar_entry_padding: Number = Fraction(0)
    sidebar_color_padding: Number = Fraction(0)
    sidebar_color_radius: Number = Fraction(0)

    time_font: FontStyle = field(default_factory=FontStyle)
    time_prefix: str = ""
    time_precision: Number = Fraction(1)

    background: Color = field(default_factory=lambda: Color(255, 255, 255, 255))

    def __post_init__(self) -> None:
        _check_choice(self.number_x_position, VERTICAL_POSITIONS, "x number position")
        _check_choice(self.number_y_position, HORIZONTAL_POSITIONS, "y number position")
        object.__setattr__(self, "atom_names", _compile_rules(self.atom_names))
        object.__setattr__(self, "zone_styles", _compile_rules(self.zone_styles))


# --- scene ----------------------------------------------------------------


@dataclass(frozen=True)
class FontConfig:
    size: float
    color: Rgba
    family: str


@dataclass(frozen=True)
class LineConfig:
    width: float
    segment_length: float
    duty: float
    color: Rgba


@dataclass(frozen=True)
class GridLegendConfig:
    """Axis numbering; ``position`` is ``(vertical, horizontal)``."""

    step: FloatPoint
    font: FontConfig
    labels: tuple[str, str]
    position: tuple[str, str]

    def __post_init__(self) -> None:
        vertical, horizontal = self.position
        _check_choice(vertical, VERTICAL_POSITIONS, "vertical position")
        _check_choice(horizontal, HORIZONTAL_POSITIONS, "horizontal position")


@dataclass(frozen=True)
class GridConfig:
    step: FloatPoint
    line: LineConfig
    legend: GridLegendConfig


@dataclass(frozen=True)
class TrapConfig:
    positions: tuple[FloatPoint, ...]
    radius: float
    line_width: float
    color: Rgba


@dataclass(frozen=True)
class ZoneConfig:
    start: FloatPoint
    size: FloatPoint
    line: LineConfig


@dataclass(frozen=True)
class SceneMachineConfig:
    grid: GridConfig
    traps: TrapConfig
    zones: tuple[ZoneConfig, ...]


@dataclass(frozen=True)
class AtomsConfig:
    label: FontConfig
    shuttle: LineConfig


@dataclass(frozen=True)
class LegendEntry:
    text: str
    color: Optional[Rgba] = None


@dataclass(frozen=True)
class LegendSection:
    name: str
    entries: tuple[LegendEntry, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))


@dataclass(frozen=True)
class LegendConfig:
    font: FontConfig
    heading_skip: float
    entry_skip: float
    color_circle_radius: float
    color_padding: float
    entries: tuple[LegendSection, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))


@dataclass(frozen=True)
class TimeConfig:
    font: FontConfig


@dataclass(frozen=True)
class SceneConfig:
    """The static part of a scene; ``content_extent`` is (top left, bottom right)."""

    machine: SceneMachineConfig
    atoms: AtomsConfig
    content_extent: tuple[FloatPoint, FloatPoint]
    legend: LegendConfig
    time: TimeConfig


@dataclass(frozen=True)
class AtomState:
    position: FloatPoint
    size: float
    color: Rgba
    shuttle: bool
    label: str


@dataclass(frozen=True)
class State:
    """The animated part of a scene at one point in time."""

    atoms: tuple[AtomState, ...]
    time: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "atoms", tuple(self.atoms))