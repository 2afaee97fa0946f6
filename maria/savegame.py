"""Saving and restoring a game in progress as plain text."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, TypeVar

from .entities import NPC, Enemy, Player
from .quests import QuestSystem
from .textstream import TextReader

DEFAULT_SAVE_PATH = "save.txt"

_T = TypeVar("_T")


def _resize(items: list[_T], size: int, factory: Callable[[], _T]) -> None:
    if size < 0:
        raise ValueError("a saved count must not be negative")
    del items[size:]
    items.extend(factory() for _ in range(size - len(items)))


def save_game(
    player: Player,
    enemies: Iterable[Enemy],
    npcs: Iterable[NPC],
    quests: QuestSystem,
    path: str | Path = DEFAULT_SAVE_PATH,
) -> None:
    """Write the player, enemies, NPCs and quests to ``path``.

    Raises :class:`OSError` when the file cannot be written.
    """
    enemies = list(enemies)
    npcs = list(npcs)
    with open(path, "w", encoding="utf-8", newline="\n") as out:
        player.save(out)
        out.write(f"{len(enemies)}\n")
        for enemy in enemies:
            enemy.save(out)
        out.write(f"{len(npcs)}\n")
        for npc in npcs:
            npc.save(out)
        out.write(f"{len(quests.active_quests)}\n")
        for quest in quests.active_quests:
            quest.save(out)


def load_game(
    player: Player,
    enemies: list[Enemy],
    enemy_texture: Any,
    npcs: list[NPC],
    npc_texture: Any,
    quests: QuestSystem,
    path: str | Path = DEFAULT_SAVE_PATH,
) -> bool:
    """Restore a game written by :func:`save_game`.

    The enemy and NPC lists are resized in place to the saved counts.
    Saved quests overwrite the existing ones in order; extra saved quests
    are ignored. Returns False when the file cannot be read; malformed
    contents raise :class:`ValueError` or :class:`EOFError`.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return False

    reader = TextReader(text)
    player.load(reader)

    _resize(enemies, reader.read_int(), Enemy)
    for enemy in enemies:
        enemy.load(reader, enemy_texture)

    _resize(npcs, reader.read_int(), NPC)
    for npc in npcs:
        npc.load(reader, npc_texture)

    quest_count = reader.read_int()
    reader.ignore()
    for quest in quests.active_quests[: max(quest_count, 0)]:
        quest.load(reader)
    return True