from pathlib import Path

import pytest

from naviz.export import ExportPhase
from naviz.menu import (
    ExportVideo,
    FileOpen,
    FileType,
    MenuState,
    SetMachine,
    SetStyle,
    version_string,
)


def test_file_type_filter_names():
    assert FileType.INSTRUCTIONS.filter_name() == "NAViz instructions"
    assert FileType.MACHINE.filter_name() == "NAViz machine"
    assert FileType.STYLE.filter_name() == "NAViz style"


@pytest.mark.parametrize("file_type", list(FileType))
def test_file_type_extension_round_trip(file_type):
    for extension in file_type.extensions():
        assert FileType.from_extension(extension) is file_type


def test_file_type_extensions_pinned():
    assert FileType.INSTRUCTIONS.extensions() == ("naviz",)
    assert FileType.MACHINE.extensions() == ("namachine",)
    assert FileType.STYLE.extensions() == ("nastyle",)


def test_from_unknown_extension():
    assert FileType.from_extension("txt") is None


def test_update_machines_sorts_by_name():
    menu = MenuState()
    menu.update_machines([("b", "Zeta"), ("a", "Alpha"), ("c", "Mid")])
    assert [name for _, name in menu.machines] == ["Alpha", "Mid", "Zeta"]


def test_update_styles_sorts_by_name():
    menu = MenuState()
    menu.update_styles([("s2", "Dark"), ("s1", "Bright")])
    assert menu.styles == [("s1", "Bright"), ("s2", "Dark")]


def test_compatible_machines_move_to_top():
    menu = MenuState()
    menu.update_machines([("a", "A"), ("b", "B"), ("c", "C"), ("d", "D")])
    menu.set_compatible_machines(["d", "b"])
    assert [machine_id for machine_id, _ in menu.machines] == ["b", "d", "a", "c"]


def test_selection_is_stored():
    menu = MenuState()
    menu.set_selected_machine("m")
    menu.set_selected_style("s")
    assert (menu.selected_machine, menu.selected_style) == ("m", "s")


def test_select_machine_and_style_emit_events_in_order():
    menu = MenuState()
    menu.select_machine("m1")
    menu.select_style("s1")
    assert menu.poll_event() == SetMachine("m1")
    assert menu.poll_event() == SetStyle("s1")
    assert menu.poll_event() is None


@pytest.mark.parametrize(
    "name, file_type",
    [("a.naviz", FileType.INSTRUCTIONS), ("dir/m.namachine", FileType.MACHINE), ("x.nastyle", FileType.STYLE)],
)
def test_load_file_by_extension_opens_own_types(name, file_type):
    menu = MenuState()
    assert menu.load_file_by_extension(name, b"content") is True
    assert menu.poll_event() == FileOpen(file_type, b"content")


def test_load_file_by_extension_unknown_is_ignored():
    menu = MenuState()
    assert menu.load_file_by_extension("a.unknown", b"x") is False
    assert menu.load_file_by_extension("noextension", b"x") is False
    assert menu.poll_event() is None
    assert menu.pending_import is None


def test_load_file_by_extension_starts_import():
    menu = MenuState(import_formats={"fmt": ["imp"]})
    assert menu.load_file_by_extension("circuit.imp", b"data") is True
    assert menu.pending_import == ("fmt", b"data")
    assert menu.poll_event() is None


def test_own_types_win_over_import_formats():
    menu = MenuState(import_formats={"fmt": ["naviz"]})
    menu.load_file_by_extension("a.naviz", b"d")
    assert menu.poll_event() == FileOpen(FileType.INSTRUCTIONS, b"d")
    assert menu.pending_import is None


def test_paste_text_opens_instructions():
    menu = MenuState()
    menu.handle_paste("atom a at (0, 0)")
    assert menu.poll_event() == FileOpen(FileType.INSTRUCTIONS, "atom a at (0, 0)".encode())


def test_paste_path_loads_file(tmp_path):
    path = tmp_path / "machine.namachine"
    path.write_bytes(b"machine data")
    menu = MenuState()
    menu.handle_paste(str(path))
    assert menu.poll_event() == FileOpen(FileType.MACHINE, b"machine data")


def test_request_export_queues_event_and_tracks_progress(tmp_path):
    menu = MenuState()
    event = menu.request_export(tmp_path / "out.mp4", (1920, 1080), 30)
    assert isinstance(event, ExportVideo)
    assert menu.poll_event() == event
    assert event.target == Path(tmp_path / "out.mp4")
    assert event.progress.phase is ExportPhase.CREATING
    assert len(menu.export_progresses) == 1


def test_request_export_rejects_invalid_settings(tmp_path):
    menu = MenuState()
    with pytest.raises(ValueError):
        menu.request_export(tmp_path / "o.mp4", (0, 1080), 30)
    with pytest.raises(ValueError):
        menu.request_export(tmp_path / "o.mp4", (1920, 1080), 0)
    assert menu.poll_event() is None


def test_version_exact_wins():
    assert version_string("v1.2.0", "v1.1.0", True) == "v1.2.0"


def test_version_latest_marks_later_commits():
    assert version_string("", "v0.4", False) == "v0.4+"
    assert version_string("", "v0.4", True) == "v0.4+~"


def test_version_unknown():
    assert version_string("", "", True) == "unknown"