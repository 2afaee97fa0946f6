"""Sprite-sheet animation."""

from __future__ import annotations

from typing import Any


class AnimatedSprite:
    """A horizontal strip of equally sized frames cycled over time."""

    def __init__(self) -> None:
        self.texture: Any = None
        self.position: tuple[float, float] = (0.0, 0.0)
        self.frame_width = 0
        self.frame_height = 0
        self.frame_count = 1
        self.current_frame = 0
        self.frame_time = 0.1
        self.time_since_last = 0.0

    def set_texture(self, texture, frame_width, frame_height, frame_count, frame_time) -> None:
        """Use a new sheet and restart from its first frame."""
        self.texture = texture
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.frame_count = frame_count
        self.frame_time = frame_time
        self.current_frame = 0

    def update(self, dt: float) -> None:
        """Advance the animation by ``dt`` seconds."""
        self.time_since_last += dt
        if self.time_since_last > self.frame_time:
            self.current_frame = (self.current_frame + 1) % self.frame_count
            self.time_since_last = 0.0

    def frame_rect(self) -> tuple[int, int, int, int]:
        """The area of the sheet showing the current frame: x, y, width, height."""
        return (
            self.frame_width * self.current_frame,
            0,
            self.frame_width,
            self.frame_height,
        )

    def draw(self, surface) -> None:
        """Blit the current frame onto ``surface`` at the sprite's position."""
        if self.texture is None:
            return
        surface.blit(self.texture, self.position, self.frame_rect())