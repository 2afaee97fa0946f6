"""Quests whose completion is checked every frame."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .textstream import TextReader


@dataclass
class Quest:
    """A quest with a predicate that tells when it is done."""

    title: str
    description: str
    completed: bool = False
    check_completion: Optional[Callable[[], bool]] = None

    def save(self, out: TextIO) -> None:
        """Write title, description and completion on three lines."""
        out.write(f"{self.title}\n{self.description}\n{int(self.completed)}\n")

    def load(self, reader: TextReader) -> None:
        """Restore state written by :meth:`save`, keeping the predicate."""
        self.title = reader.read_line()
        self.description = reader.read_line()
        self.completed = reader.read_int() != 0
        reader.ignore()


@dataclass
class QuestSystem:
    """The list of active quests."""

    active_quests: list[Quest] = field(default_factory=list)

    def add_quest(self, title: str, description: str, checker: Callable[[], bool]) -> Quest:
        """Add an open quest and return it."""
        quest = Quest(title, description, False, checker)
        self.active_quests.append(quest)
        return quest

    def update(self) -> None:
        """Mark every open quest whose predicate now holds as completed."""
        for quest in self.active_quests:
            if quest.completed or quest.check_completion is None:
                continue
            if quest.check_completion():
                quest.completed = True