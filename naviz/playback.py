"""Playback clock: the animation time, play/pause state and speed."""

from __future__ import annotations

import math
from dataclasses import dataclass

#: Highest playback speed that can be set.
MAX_SPEED = 5.0

#: Icon shown while paused (pressing it resumes playback).
PLAY_ICON = "\u25b6"
#: Icon shown while playing (pressing it pauses playback).
PAUSE_ICON = "\u23f8"
#: Prefix shown before the playback speed: multiplication sign and thin space.
TIMES_PREFIX = "\u00d7\u2009"


@dataclass
class PlaybackClock:
    """Tracks the current animation time.

    Time advances by ``speed`` animation units per real time unit unless
    playback is paused. Seeking is limited to ``0 .. duration`` and the speed
    to ``0 .. MAX_SPEED``.
    """

    duration: float = 0.0
    animation_time: float = 0.0
    speed: float = 1.0
    paused: bool = False

    def advance(self, delta: float) -> float:
        """Advance by ``delta`` real time units; returns the new animation time."""
        if not self.paused:
            self.animation_time += self.speed * float(delta)
        return self.animation_time

    def toggle_pause(self) -> bool:
        """Switch between playing and paused; returns whether now paused."""
        self.paused = not self.paused
        return self.paused

    def seek(self, time: float) -> float:
        """Jump to ``time``, clamped to the animation; returns the time set."""
        time = float(time)
        if math.isnan(time):
            raise ValueError("cannot seek to NaN")
        self.animation_time = min(max(time, 0.0), self.duration)
        return self.animation_time

    def set_speed(self, speed: float) -> float:
        """Set the playback speed, clamped to ``0 .. MAX_SPEED``; returns it."""
        speed = float(speed)
        if math.isnan(speed):
            raise ValueError("playback speed cannot be NaN")
        self.speed = min(max(speed, 0.0), MAX_SPEED)
        return self.speed

    @property
    def icon(self) -> str:
        """The icon of the play/pause button."""
        return PLAY_ICON if self.paused else PAUSE_ICON

    @property
    def speed_label(self) -> str:
        """The playback speed as displayed next to the progress bar."""
        return f"{TIMES_PREFIX}{self.speed}"