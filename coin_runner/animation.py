# animation.py
from __future__ import annotations


class FrameCycle:
    """
    Tick-based looping animation frame counter.

    - frame_delay is ticks per frame (e.g., 5).
    - Call tick() once per simulation tick; read index to pick the frame.
    - The simulation only tracks which frame is showing; drawing it is the
      renderer's job.
    """

    def __init__(self, frame_count: int, frame_delay: int):
        if frame_count < 1:
            raise ValueError("FrameCycle requires at least one frame.")
        if frame_delay < 1:
            raise ValueError("frame_delay must be at least one tick.")

        self.frame_count = frame_count
        self.frame_delay = frame_delay

        self.index = 0
        self.counter = 0

    def reset(self) -> None:
        self.index = 0
        self.counter = 0

    def tick(self) -> bool:
        """Advance the counter; returns True on ticks where the frame changed."""
        self.counter += 1
        if self.counter < self.frame_delay:
            return False

        self.counter = 0
        self.index = (self.index + 1) % self.frame_count
        return True
