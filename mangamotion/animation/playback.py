"""Fixed-interval frame cycling, mirroring the browser slideshow loop."""
from __future__ import annotations

from dataclasses import dataclass

from mangamotion.utils.config import settings


@dataclass
class Playback:
    frame_count: int
    interval_ms: int = settings.playback_interval_ms
    current: int = 0
    playing: bool = False

    def __post_init__(self) -> None:
        if self.frame_count < 0:
            raise ValueError("frame_count must be non-negative")
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be positive")

    def play(self) -> None:
        self.current = 0
        self.playing = self.frame_count > 0

    def stop(self) -> None:
        self.playing = False

    def advance(self) -> int:
        """Move to the next frame on a timer tick; a stopped loop stays put."""
        if self.playing and self.frame_count:
            self.current = (self.current + 1) % self.frame_count
        return self.current

    def frame_at(self, elapsed_ms: float) -> int:
        """Frame shown ``elapsed_ms`` after playback started."""
        if not self.frame_count:
            return 0
        ticks = int(elapsed_ms // self.interval_ms)
        return ticks % self.frame_count

    def offset_ms(self, index: int) -> int:
        """Time after playback starts at which frame ``index`` is first shown."""
        return index * self.interval_ms

    @property
    def loop_duration_ms(self) -> int:
        return self.frame_count * self.interval_ms
