"""State of video export: the settings dialog and the progress of running exports."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

DEFAULT_RESOLUTION = (1920, 1080)
DEFAULT_FPS = 30


@dataclass
class ExportSettings:
    """The settings chosen in the export dialog."""

    resolution: tuple[int, int] = DEFAULT_RESOLUTION
    fps: int = DEFAULT_FPS
    shown: bool = False

    def show(self) -> None:
        """Open the dialog with the default settings."""
        self.resolution = DEFAULT_RESOLUTION
        self.fps = DEFAULT_FPS
        self.shown = True

    def accept(self) -> tuple[tuple[int, int], int]:
        """Confirm the dialog; closes it and returns ``(resolution, fps)``."""
        if not self.shown:
            raise RuntimeError("export settings are not shown")
        self.shown = False
        return self.resolution, self.fps


class ExportPhase(Enum):
    CREATING = "creating"
    WORKING = "working"
    DONE = "done"
    UNKNOWN = "unknown"


_progress_ids = itertools.count()
_progress_lock = threading.Lock()


def _next_progress_number() -> int:
    with _progress_lock:
        return next(_progress_ids)


class ExportProgress:
    """The progress of one running export.

    Events may arrive from another thread. ``render`` and ``encode`` are
    ``(current_time, duration)`` pairs.
    """

    def __init__(self) -> None:
        number = _next_progress_number()
        self.window_id = f"export_progress_{number}"
        self.grid_id = f"export_progress_grid_{number}"
        self.phase = ExportPhase.CREATING
        self.render: tuple[float, float] = (0.0, 0.0)
        self.encode: tuple[float, float] = (0.0, 0.0)
        self.exit_code: Optional[int] = None
        self._lock = threading.Lock()

    def on_render(self, current: float, maximum: float) -> None:
        with self._lock:
            if self.phase is not ExportPhase.WORKING:
                self.phase = ExportPhase.WORKING
                self.encode = (0.0, maximum)
            self.render = (current, maximum)

    def on_encode(self, current: float, maximum: float) -> None:
        with self._lock:
            if self.phase is not ExportPhase.WORKING:
                self.phase = ExportPhase.WORKING
                self.render = (0.0, maximum)
            self.encode = (current, maximum)

    def on_done(self, exit_code: Optional[int]) -> None:
        """The encoder finished; ``exit_code`` is ``None`` if it was killed by a signal."""
        with self._lock:
            self.phase = ExportPhase.DONE
            self.exit_code = exit_code

    def on_disconnect(self) -> None:
        """The event source went away; the state is unknown unless already done."""
        with self._lock:
            if self.phase is not ExportPhase.DONE:
                self.phase = ExportPhase.UNKNOWN

    @property
    def closable(self) -> bool:
        """Whether the user may close this progress window."""
        return self.phase in (ExportPhase.DONE, ExportPhase.UNKNOWN)

    @property
    def succeeded(self) -> bool:
        return self.phase is ExportPhase.DONE and self.exit_code == 0

    def message(self) -> Optional[str]:
        """The final message once the export has ended, else ``None``."""
        if self.phase is ExportPhase.DONE:
            if self.exit_code == 0:
                return "Finished exporting!"
            if self.exit_code is not None:
                return f"Error during export! FFmpeg exited with code {self.exit_code}."
            return "Error during export!"
        if self.phase is ExportPhase.UNKNOWN:
            return "An error occurred while exporting!"
        return None


class ExportProgresses:
    """All export progress windows."""

    def __init__(self) -> None:
        self._progresses: list[ExportProgress] = []

    def add(self) -> ExportProgress:
        """Start tracking a new export and return its progress."""
        progress = ExportProgress()
        self._progresses.append(progress)
        return progress

    def remove_closed(self, closed_ids: Iterable[str]) -> list[ExportProgress]:
        """Drop the closable progresses whose windows were closed; returns them."""
        closed = set(closed_ids)
        removed = [p for p in self._progresses if p.window_id in closed and p.closable]
        self._progresses = [p for p in self._progresses if p not in removed]
        return removed

    def __iter__(self) -> Iterator[ExportProgress]:
        return iter(list(self._progresses))

    def __len__(self) -> int:
        return len(self._progresses)