"""Menus, overlays and HUD drawing.

Every function and class here takes ``fonts``: a callable that maps a
character size in pixels to a font with ``render`` and ``get_linesize``,
such as ``lambda size: resources.load_font(path, size)``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import pygame

from .quests import QuestSystem

Color = tuple[int, ...]
Fonts = Callable[[int], Any]

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
YELLOW: Color = (255, 255, 0)
CYAN: Color = (0, 255, 255)
BAR_BACKGROUND: Color = (50, 50, 50)
FAITH_BLUE: Color = (100, 180, 255)
COMPLETED_GREEN: Color = (100, 200, 100)

BACKGROUND_TEXTURE = "assets/textures/background.png"


def _draw_text(surface, fonts: Fonts, text: str, size: int, color: Color, position) -> None:
    """Render ``text`` line by line, stacking the lines downwards."""
    font = fonts(size)
    x, y = position
    for line in text.split("\n"):
        surface.blit(font.render(line, True, color), (x, y))
        y += font.get_linesize()


def _draw_panel(surface, size, color: Color, position) -> None:
    """Blend a translucent rectangle onto ``surface``."""
    panel = pygame.Surface((int(size[0]), int(size[1])), pygame.SRCALPHA)
    panel.fill(color)
    surface.blit(panel, position)


def draw_bar(surface, x, y, width, height, percent, fill, background) -> None:
    """Draw a progress bar filled to ``percent`` (0 to 1) of its width."""
    surface.fill(background, pygame.Rect(int(x), int(y), int(width), int(height)))
    filled = max(0, int(width * percent))
    surface.fill(fill, pygame.Rect(int(x), int(y), filled, int(height)))


def draw_hud(surface, fonts: Fonts, health, max_health, faith, max_faith) -> None:
    """Draw the health and faith bars with their labels."""
    draw_bar(surface, 20, 20, 200, 24, health / max_health, RED, BAR_BACKGROUND)
    _draw_text(surface, fonts, "Salud", 18, WHITE, (24, 22))
    draw_bar(surface, 20, 50, 200, 14, faith / max_faith, FAITH_BLUE, BAR_BACKGROUND)
    _draw_text(surface, fonts, "Fe", 12, WHITE, (24, 52))


def draw_quest_hud(surface, fonts: Fonts, quest_system: QuestSystem) -> None:
    """List the active quests in a panel, marking completed ones."""
    quests = quest_system.active_quests
    if not quests:
        return
    _draw_panel(surface, (320, 30 + 40 * len(quests)), (0, 0, 0, 170), (900, 20))
    _draw_text(surface, fonts, "Misiones:", 22, YELLOW, (910, 25))
    y = 55
    for quest in quests:
        title = quest.title + (" (Completado)" if quest.completed else "")
        color = COMPLETED_GREEN if quest.completed else WHITE
        _draw_text(surface, fonts, title, 18, color, (910, y))
        y += 34


class Menu:
    """The main menu and the pause overlay."""

    def __init__(self, fonts: Fonts) -> None:
        self.fonts = fonts

    def draw_main_menu(self, surface) -> None:
        _draw_text(surface, self.fonts, "MarIA", 64, WHITE, (340, 100))
        _draw_text(surface, self.fonts, "Presiona ENTER para jugar", 32, (200, 200, 200), (370, 220))
        _draw_text(surface, self.fonts, "Presiona ESC para salir", 28, (150, 150, 150), (420, 280))

    def draw_pause_menu(self, surface) -> None:
        _draw_panel(surface, (400, 180), (0, 0, 0, 180), (440, 260))
        _draw_text(surface, self.fonts, "PAUSA", 52, WHITE, (570, 275))
        _draw_text(surface, self.fonts, "Presiona ESC para reanudar", 26, (200, 200, 200), (495, 340))
        _draw_text(surface, self.fonts, "Presiona Q para salir", 22, (150, 150, 150), (545, 380))


class GameOverScreen:
    """The screen shown when the player dies."""

    def __init__(self, fonts: Fonts) -> None:
        self.fonts = fonts

    def draw(self, surface, score: int = 0) -> None:
        _draw_text(surface, self.fonts, "GAME OVER", 64, RED, (420, 200))
        retry = (
            "Presiona ENTER para reintentar\n"
            "Presiona ESC para salir\n"
            f"Score: {score}"
        )
        _draw_text(surface, self.fonts, retry, 32, WHITE, (370, 330))


class OptionsMenu:
    """Choice of window resolution, with the frame rate shown."""

    RESOLUTIONS: tuple[tuple[int, int], ...] = ((1280, 720), (1600, 900), (1920, 1080))

    def __init__(self, fonts: Fonts) -> None:
        self.fonts = fonts
        self.resolutions = list(self.RESOLUTIONS)
        self.selected = 0
        self.fps = 60

    def draw(self, surface) -> None:
        width, height = self.selected_resolution()
        _draw_text(surface, self.fonts, "OPCIONES", 50, WHITE, (480, 90))
        _draw_text(surface, self.fonts, f"Resolucion: {width}x{height}", 28, YELLOW, (420, 200))
        _draw_text(surface, self.fonts, f"FPS: {self.fps}", 28, GREEN, (420, 260))

    def next_resolution(self) -> None:
        self.selected = (self.selected + 1) % len(self.resolutions)

    def prev_resolution(self) -> None:
        self.selected = (self.selected - 1) % len(self.resolutions)

    def selected_resolution(self) -> tuple[int, int]:
        return self.resolutions[self.selected]


class QuestSelector:
    """A list of the active quests with one highlighted."""

    def __init__(self, fonts: Fonts, quest_system: QuestSystem) -> None:
        self.fonts = fonts
        self.quest_system = quest_system
        self.selected = 0

    def draw(self, surface) -> None:
        quests = self.quest_system.active_quests
        if not quests:
            return
        _draw_panel(surface, (400, 220), (0, 0, 0, 190), (440, 200))
        _draw_text(surface, self.fonts, "Selecciona una mision:", 30, YELLOW, (460, 210))
        y = 260
        for index, quest in enumerate(quests):
            color = CYAN if index == self.selected else WHITE
            _draw_text(surface, self.fonts, quest.title, 22, color, (470, y))
            y += 40

    def next(self) -> None:
        count = len(self.quest_system.active_quests)
        if count > 0:
            self.selected = (self.selected + 1) % count

    def prev(self) -> None:
        count = len(self.quest_system.active_quests)
        if count > 0:
            self.selected = (self.selected + count - 1) % count


class Level:
    """A background with the characters drawn over it."""

    def __init__(self, resources) -> None:
        self.background = resources.load_texture(BACKGROUND_TEXTURE)
        self.elapsed = 0.0

    def update(self, dt: float, player, npcs: Iterable) -> None:
        """Advance the level clock; the characters are updated by their owner."""
        self.elapsed += dt

    def draw(self, surface, player, npcs: Iterable) -> None:
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        for npc in npcs:
            npc.draw(surface)
        player.draw(surface)