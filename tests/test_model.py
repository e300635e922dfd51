import dataclasses
from fractions import Fraction

import pytest

from naviz.color import Color
from naviz.model import (
    Cz,
    FontConfig,
    GridLegendConfig,
    InstructionGroup,
    Instructions,
    LegendEntry,
    LegendSection,
    Load,
    MachineConfig,
    MachineZone,
    Move,
    OperationStyle,
    Rz,
    SetupAtom,
    State,
    Store,
    VisualConfig,
    ZoneStyle,
)


def test_operation_radius_absolute_ignores_atom_radius():
    style = OperationStyle(radius=Fraction(3, 2), relative=False)
    assert style.radius_for(Fraction(1)) == Fraction(3, 2)
    assert style.radius_for(Fraction(10)) == Fraction(3, 2)


def test_operation_radius_relative_scales_with_atom():
    style = OperationStyle(radius=Fraction(3, 2), relative=True)
    assert style.radius_for(1) == Fraction(3, 2)
    assert style.radius_for(Fraction(8)) == 2 * style.radius_for(Fraction(4))


def test_visual_config_compiles_string_patterns():
    visual = VisualConfig(
        atom_names=[(r"^atom(\d+)$", r"\1")],
        zone_styles=[("zone.*", ZoneStyle(name="Zone"))],
    )
    pattern, replacement = visual.atom_names[0]
    assert pattern.pattern == r"^atom(\d+)$"
    assert pattern.match("atom3") is not None
    assert replacement == r"\1"
    assert visual.zone_styles[0][1].name == "Zone"


def test_visual_config_rejects_bad_number_positions():
    with pytest.raises(ValueError):
        VisualConfig(number_x_position="left")
    with pytest.raises(ValueError):
        VisualConfig(number_y_position="top")


def test_grid_legend_rejects_bad_position():
    font = FontConfig(1.0, (0, 0, 0, 255), "")
    with pytest.raises(ValueError):
        GridLegendConfig((1.0, 1.0), font, ("x", "y"), ("left", "top"))
    legend = GridLegendConfig((1.0, 1.0), font, ("x", "y"), ("top", "right"))
    assert legend.position == ("top", "right")


def test_instructions_are_sorted_by_time():
    group = InstructionGroup([Load("a")])
    instructions = Instructions(
        setup=[SetupAtom("a", (Fraction(0), Fraction(0)))],
        instructions=[
            (Fraction(5), [(False, Fraction(0), group)]),
            (Fraction(1), [(True, Fraction(0), group)]),
        ],
        targets=["machine"],
    )
    assert [time for time, _ in instructions.instructions] == [Fraction(1), Fraction(5)]
    assert instructions.targets == ("machine",)
    assert isinstance(instructions.setup, tuple)


def test_instruction_defaults():
    assert Load("a").position is None
    assert Store("a").position is None
    assert InstructionGroup([Cz(["z"])]).variable is False
    assert Rz(["a", "b"]).targets == ("a", "b")
    with pytest.raises(TypeError):
        Move("a")


def test_models_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Load("a").id = "b"
    with pytest.raises(dataclasses.FrozenInstanceError):
        VisualConfig().margin = Fraction(1)


def test_machine_config_zone_lookup():
    zone = MachineZone((0, 0), (Fraction(10), Fraction(5)))
    machine = MachineConfig(zones={"zone_a": zone})
    assert machine.zones["zone_a"] is zone
    assert "zone_b" not in machine.zones
    assert MachineConfig().zones == {}


def test_legend_and_state_collections_become_tuples():
    section = LegendSection("Title", [LegendEntry("entry")])
    assert section.entries == (LegendEntry("entry", None),)
    assert State([], "t").atoms == ()


def test_default_colors_are_colors():
    visual = VisualConfig()
    assert tuple(visual.background) == (255, 255, 255, 255)
    assert isinstance(visual.rz.color, Color)