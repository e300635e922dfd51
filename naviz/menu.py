"""Menu state: file types, machine and style lists, and the events the menu emits."""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from .export import ExportProgress, ExportProgresses

_log = logging.getLogger(__name__)

#: Whether the application runs on a web platform (never the case here).
WEB = False


class FileType(Enum):
    """The file types the application can open directly."""

    INSTRUCTIONS = "instructions"
    MACHINE = "machine"
    STYLE = "style"

    def filter_name(self) -> str:
        """The name shown for this type in a file dialog."""
        return _FILTER_NAMES[self]

    def extensions(self) -> tuple[str, ...]:
        """The file extensions (without dot) of this type."""
        return _EXTENSIONS[self]

    @classmethod
    def from_extension(cls, extension: str) -> Optional[FileType]:
        """The first file type that uses ``extension``, or ``None``."""
        return next((file_type for file_type in cls if extension in file_type.extensions()), None)


_FILTER_NAMES = {
    FileType.INSTRUCTIONS: "NAViz instructions",
    FileType.MACHINE: "NAViz machine",
    FileType.STYLE: "NAViz style",
}

_EXTENSIONS = {
    FileType.INSTRUCTIONS: ("naviz",),
    FileType.MACHINE: ("namachine",),
    FileType.STYLE: ("nastyle",),
}


@dataclass(frozen=True)
class FileOpen:
    """A file of ``file_type`` with ``contents`` was opened."""

    file_type: FileType
    contents: bytes


@dataclass(frozen=True)
class SetMachine:
    """The machine with ``machine_id`` was selected."""

    machine_id: str


@dataclass(frozen=True)
class SetStyle:
    """The style with ``style_id`` was selected."""

    style_id: str


@dataclass(frozen=True)
class ImportMachine:
    """The machine file at ``path`` should be imported."""

    path: Path


@dataclass(frozen=True)
class ImportStyle:
    """The style file at ``path`` should be imported."""

    path: Path


@dataclass(frozen=True)
class ExportVideo:
    """A video should be exported to ``target``; progress is reported to ``progress``."""

    target: Path
    resolution: tuple[int, int]
    fps: int
    progress: ExportProgress


MenuEvent = Union[FileOpen, SetMachine, SetStyle, ImportMachine, ImportStyle, ExportVideo]


def _extension(name: str) -> Optional[str]:
    suffix = Path(name).suffix
    return suffix[1:] if suffix else None


def _is_file(text: str) -> bool:
    try:
        return Path(text).is_file()
    except (OSError, ValueError):
        return False


class MenuState:
    """The state behind the menu bar.

    ``machines`` and ``styles`` are lists of ``(id, name)`` pairs.
    ``import_formats`` maps the name of each import format to its extensions;
    a file with such an extension starts an import, kept in
    ``pending_import`` as ``(format_name, contents)``.
    """

    def __init__(self, import_formats: Optional[Mapping[str, Iterable[str]]] = None) -> None:
        self._events: queue.Queue = queue.Queue()
        self.machines: list[tuple[str, str]] = []
        self.styles: list[tuple[str, str]] = []
        self.selected_machine: Optional[str] = None
        self.selected_style: Optional[str] = None
        self.import_formats: dict[str, tuple[str, ...]] = {
            name: tuple(extensions) for name, extensions in (import_formats or {}).items()
        }
        self.pending_import: Optional[tuple[str, Optional[bytes]]] = None
        self.export_progresses = ExportProgresses()

    @property
    def events(self) -> queue.Queue:
        """The queue the menu's events are put into."""
        return self._events

    def update_machines(self, machines: Iterable[tuple[str, str]]) -> None:
        """Replace the machine list, sorted by name."""
        self.machines = sorted(machines, key=lambda entry: entry[1])

    def set_compatible_machines(self, machines: Iterable[str]) -> None:
        """Move the compatible machines to the top, each part sorted by name."""
        compatible = set(machines)
        self.machines.sort(key=lambda entry: (entry[0] not in compatible, entry[1]))

    def set_selected_machine(self, machine_id: Optional[str]) -> None:
        self.selected_machine = machine_id

    def update_styles(self, styles: Iterable[tuple[str, str]]) -> None:
        """Replace the style list, sorted by name."""
        self.styles = sorted(styles, key=lambda entry: entry[1])

    def set_selected_style(self, style_id: Optional[str]) -> None:
        self.selected_style = style_id

    def select_machine(self, machine_id: str) -> SetMachine:
        """The user chose a machine from the list."""
        event = SetMachine(machine_id)
        self._events.put(event)
        return event

    def select_style(self, style_id: str) -> SetStyle:
        """The user chose a style from the list."""
        event = SetStyle(style_id)
        self._events.put(event)
        return event

    def load_file_by_extension(self, name: str, contents: bytes) -> bool:
        """Open or start importing a file, judged by the extension of ``name``.

        Own file types come before import formats; among them the first match
        wins. Returns whether the file was recognised.
        """
        extension = _extension(name)
        if extension is None:
            return False
        file_type = FileType.from_extension(extension)
        if file_type is not None:
            self._events.put(FileOpen(file_type, bytes(contents)))
            return True
        for format_name, extensions in self.import_formats.items():
            if extension in extensions:
                self.pending_import = (format_name, bytes(contents))
                return True
        return False

    def handle_paste(self, text: str) -> None:
        """Handle pasted text: a path to an existing file is loaded, other text opened as instructions."""
        if not WEB and _is_file(text):
            try:
                contents = Path(text).read_bytes()
            except OSError:
                _log.error("Failed to read file")
                return
            self.load_file_by_extension(text, contents)
        else:
            self._events.put(FileOpen(FileType.INSTRUCTIONS, text.encode("utf-8")))

    def request_export(self, target: Union[str, Path], resolution: tuple[int, int], fps: int) -> ExportVideo:
        """Queue a video export and start tracking its progress."""
        width, height = resolution
        if width <= 0 or height <= 0:
            raise ValueError("resolution must be positive")
        if fps <= 0:
            raise ValueError("fps must be positive")
        event = ExportVideo(Path(target), (int(width), int(height)), int(fps), self.export_progresses.add())
        self._events.put(event)
        return event

    def poll_event(self) -> Optional[MenuEvent]:
        """The next pending event, or ``None`` if there is none."""
        try:
            return self._events.get_nowait()
        except queue.Empty:
            return None


def version_string(exact_version: str, latest_version: str, dirty: bool) -> str:
    """The program version from version-control information.

    An exact version is used as is; otherwise the latest version gets a
    ``+`` (and a ``~`` when dirty); without any version it is ``unknown``.
    """
    if exact_version:
        return exact_version
    if latest_version:
        return f"{latest_version}+{'~' if dirty else ''}"
    return "unknown"