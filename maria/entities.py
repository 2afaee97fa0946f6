"""Player, enemies and non-player characters with their save format."""

from __future__ import annotations

import math
from collections.abc import Collection, Iterable
from typing import TextIO

from .animation import AnimatedSprite
from .textstream import TextReader

ENEMY_HEALTH = 30.0
PLAYER_START = (100.0, 400.0)


def _num(value: float) -> str:
    return f"{value:g}"


class Enemy(AnimatedSprite):
    """An animated enemy with health that can be killed."""

    def __init__(self) -> None:
        super().__init__()
        self.alive = True
        self.health = ENEMY_HEALTH

    def init(self, texture, position) -> None:
        """Place a fresh, fully healthy enemy."""
        self.set_texture(texture, 64, 64, 4, 0.13)
        self.position = (float(position[0]), float(position[1]))
        self.alive = True
        self.health = ENEMY_HEALTH

    def save(self, out: TextIO) -> None:
        """Write position, health and liveness as one line."""
        x, y = self.position
        out.write(f"{_num(x)} {_num(y)} {_num(self.health)} {int(self.alive)}\n")

    def load(self, reader: TextReader, texture) -> None:
        """Restore state written by :meth:`save`."""
        x = reader.read_float()
        y = reader.read_float()
        health = reader.read_float()
        alive = reader.read_int()
        self.set_texture(texture, 64, 64, 4, 0.13)
        self.position = (x, y)
        self.health = health
        self.alive = alive != 0


class NPC(AnimatedSprite):
    """A character the player can talk to, cycling through its lines."""

    def __init__(self) -> None:
        super().__init__()
        self.dialogues: list[str] = []
        self.current_dialogue = 0
        self.interact_radius = 50.0

    def init(self, texture, position, dialogues: Iterable[str]) -> None:
        """Place the character with its lines of dialogue."""
        self.set_texture(texture, 64, 64, 4, 0.22)
        self.position = (float(position[0]), float(position[1]))
        self.dialogues = list(dialogues)
        self.current_dialogue = 0

    def can_interact(self, player_position) -> bool:
        """True when the player stands within the interaction radius."""
        dx = player_position[0] - self.position[0]
        dy = player_position[1] - self.position[1]
        return math.hypot(dx, dy) < self.interact_radius

    def interact(self) -> str:
        """Move on to the next line of dialogue and return it."""
        if not self.dialogues:
            return ""
        self.current_dialogue = (self.current_dialogue + 1) % len(self.dialogues)
        return self.dialogues[self.current_dialogue]

    def save(self, out: TextIO) -> None:
        """Write position, dialogue index and every line of dialogue."""
        x, y = self.position
        out.write(
            f"{_num(x)} {_num(y)} {self.current_dialogue} {len(self.dialogues)}\n"
        )
        for line in self.dialogues:
            out.write(f"{line}\n")

    def load(self, reader: TextReader, texture) -> None:
        """Restore state written by :meth:`save`."""
        x = reader.read_float()
        y = reader.read_float()
        index = reader.read_int()
        count = reader.read_int()
        if index < 0 or count < 0:
            raise ValueError("dialogue index and count must not be negative")
        self.set_texture(texture, 64, 64, 4, 0.22)
        self.position = (x, y)
        self.current_dialogue = index
        reader.ignore()
        self.dialogues = [reader.read_line() for _ in range(count)]


class Player(AnimatedSprite):
    """The player character, moved with the W, A, S and D keys."""

    def __init__(self, texture) -> None:
        super().__init__()
        self.health = 100.0
        self.max_health = 100.0
        self.faith = 100.0
        self.max_faith = 100.0
        self.speed = 200.0
        self.set_texture(texture, 64, 64, 4, 0.14)
        self.position = PLAYER_START

    def update(self, dt: float, keys: Collection[str]) -> None:
        """Move according to the held keys ("w", "a", "s", "d"); animate only while moving."""
        dx = dy = 0.0
        step = self.speed * dt
        if "w" in keys:
            dy -= step
        if "s" in keys:
            dy += step
        if "a" in keys:
            dx -= step
        if "d" in keys:
            dx += step
        x, y = self.position
        self.position = (x + dx, y + dy)
        if dx != 0 or dy != 0:
            super().update(dt)

    def save(self, out: TextIO) -> None:
        """Write position, health and faith as one line."""
        x, y = self.position
        out.write(f"{_num(x)} {_num(y)} {_num(self.health)} {_num(self.faith)}\n")

    def load(self, reader: TextReader) -> None:
        """Restore state written by :meth:`save`."""
        x = reader.read_float()
        y = reader.read_float()
        self.health = reader.read_float()
        self.faith = reader.read_float()
        self.position = (x, y)

    def reset(self) -> None:
        """Return to the start with full health and faith."""
        self.position = PLAYER_START
        self.health = self.max_health
        self.faith = self.max_faith