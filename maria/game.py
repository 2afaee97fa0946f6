"""The game: states, input handling, per-frame logic and drawing."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Collection
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Any, Optional

import pygame

from .entities import ENEMY_HEALTH, NPC, PLAYER_START, Enemy, Player
from .quests import QuestSystem
from .resources import ResourceManager
from .savegame import DEFAULT_SAVE_PATH, load_game, save_game
from .screens import (
    CYAN,
    GREEN,
    WHITE,
    YELLOW,
    GameOverScreen,
    Menu,
    OptionsMenu,
    QuestSelector,
    draw_hud,
    draw_quest_hud,
)

WINDOW_SIZE = (1280, 720)
FRAME_RATE = 60
BACKGROUND: tuple[int, int, int] = (10, 10, 20)
FONT_PATH = "assets/fonts/PressStart2P-Regular.ttf"
MUSIC_PATH = "assets/music/music 1.ogg"

PLAYER_TEXTURE = "assets/textures/player_sheet.png"
ENEMY_TEXTURE = "assets/textures/enemy_sheet.png"
NPC_TEXTURE = "assets/textures/npc_sheet.png"
SCENERY: tuple[tuple[str, tuple[int, int]], ...] = (
    ("assets/textures/fatima_landscape.jpg", (0, 0)),
    ("assets/textures/encina.jpeg", (600, 410)),
    ("assets/textures/virgen_aparicion.jpg", (650, 280)),
    ("assets/textures/npc_lucia.png", (580, 520)),
    ("assets/textures/npc_jacinta.jpg", (680, 520)),
    ("assets/textures/npc_francisco.jpg", (780, 520)),
)
HIT_SOUND = "assets/sounds/hit.wav"
PICKUP_SOUND = "assets/sounds/pickup.wav"

ATTACK_RANGE = 60.0
ATTACK_DAMAGE = 20.0
HIT_RANGE = 50.0
HIT_DAMAGE = 10.0
HIT_COOLDOWN = 0.5
PICKUP_RANGE = 40.0
PICKUP_SCORE = 10
COLLECTIBLE_RADIUS = 16
NOTICE_SECONDS = 2.0

Fonts = Callable[[int], Any]


class GameState(Enum):
    """Which screen the game is showing."""

    MENU = auto()
    OPTIONS = auto()
    PLAYING = auto()
    PAUSED = auto()
    SELECT_QUEST = auto()
    GAME_OVER = auto()


@dataclass
class Collectible:
    """An item lying on the ground that scores points when walked over."""

    position: tuple[float, float]
    picked: bool = False


def default_dialogues() -> list[str]:
    """The lines spoken by the village NPC."""
    return ["¡Hola!", "¡Buen trabajo!", "¡Chau!"]


def _distance(a, b) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def _optional_asset(loader: Callable[[str], Any], path: str) -> Any:
    """Load an asset, reporting and returning None if it is unavailable."""
    try:
        return loader(path)
    except (OSError, pygame.error) as exc:
        print(f"No se pudo cargar {path}: {exc}", file=sys.stderr)
        return None


def _play(sound) -> None:
    if sound is not None:
        sound.play()


def _draw_text(surface, fonts: Fonts, text: str, size: int, color, position) -> None:
    surface.blit(fonts(size).render(text, True, color), position)


class Game:
    """All game state, driven by key presses, updates and draws.

    Keys are given by name: "enter", "escape", "space", "tab", "up",
    "down", "left", "right" or a lower-case letter.
    """

    def __init__(self, resources, fonts: Fonts, save_path=DEFAULT_SAVE_PATH) -> None:
        self.resources = resources
        self.fonts = fonts
        self.save_path = Path(save_path)
        self.running = True
        self.state = GameState.MENU

        self.menu = Menu(fonts)
        self.game_over_screen = GameOverScreen(fonts)
        self.options_menu = OptionsMenu(fonts)

        player_texture = _optional_asset(resources.load_texture, PLAYER_TEXTURE)
        self.enemy_texture = _optional_asset(resources.load_texture, ENEMY_TEXTURE)
        self.npc_texture = _optional_asset(resources.load_texture, NPC_TEXTURE)
        self.scenery = [
            (_optional_asset(resources.load_texture, path), position)
            for path, position in SCENERY
        ]

        self.player = Player(player_texture)
        self.player.set_texture(player_texture, 64, 64, 4, 0.13)
        self.player.position = PLAYER_START

        self.enemies: list[Enemy] = []
        for position in ((700, 400), (900, 500)):
            enemy = Enemy()
            enemy.init(self.enemy_texture, position)
            self.enemies.append(enemy)

        npc = NPC()
        npc.init(self.npc_texture, (400, 400), default_dialogues())
        self.npcs: list[NPC] = [npc]

        self.quests = QuestSystem()
        self.quests.add_quest(
            "Derrota a todos los enemigos",
            "Acaba con todos los enemigos en pantalla.",
            lambda: not any(enemy.alive for enemy in self.enemies),
        )
        self.quest_selector = QuestSelector(fonts, self.quests)

        self.show_save_notice = False
        self.show_load_notice = False
        self._since_notice = 0.0
        self.current_dialogue = ""
        self.score = 0

        self._hit_sound = _optional_asset(resources.load_sound, HIT_SOUND)
        self._pickup_sound = _optional_asset(resources.load_sound, PICKUP_SOUND)

        self.collectibles = [Collectible((300.0, 400.0)), Collectible((600.0, 420.0))]
        self._since_hit = 0.0

    # --- input -----------------------------------------------------------

    def _save(self) -> None:
        try:
            save_game(self.player, self.enemies, self.npcs, self.quests, self.save_path)
        except OSError as exc:
            print(f"No se pudo guardar: {exc}", file=sys.stderr)
        self.show_save_notice = True
        self._since_notice = 0.0

    def _load(self) -> None:
        try:
            loaded = load_game(
                self.player,
                self.enemies,
                self.enemy_texture,
                self.npcs,
                self.npc_texture,
                self.quests,
                self.save_path,
            )
        except (ValueError, EOFError) as exc:
            print(f"Partida guardada no valida: {exc}", file=sys.stderr)
            loaded = False
        if loaded:
            self.show_load_notice = True
            self._since_notice = 0.0

    def _attack(self) -> None:
        for enemy in self.enemies:
            if not enemy.alive:
                continue
            if _distance(enemy.position, self.player.position) < ATTACK_RANGE:
                enemy.health -= ATTACK_DAMAGE
            if enemy.health <= 0:
                enemy.alive = False

    def _restart(self) -> None:
        self.player.position = PLAYER_START
        self.player.health = 100.0
        self.player.faith = 100.0
        for enemy in self.enemies:
            enemy.alive = True
            enemy.health = ENEMY_HEALTH
        self.state = GameState.MENU
        self.score = 0

    def handle_key(self, key: Optional[str]) -> None:
        """React to a single key press in the current state."""
        state = self.state
        if state is GameState.MENU:
            if key == "enter":
                self.state = GameState.PLAYING
            elif key == "o":
                self.state = GameState.OPTIONS
            elif key == "l":
                self._load()
        elif state is GameState.OPTIONS:
            if key == "escape":
                self.state = GameState.MENU
            elif key == "right":
                self.options_menu.next_resolution()
            elif key == "left":
                self.options_menu.prev_resolution()
        elif state is GameState.PLAYING:
            if key == "escape":
                self.state = GameState.PAUSED
            elif key == "s":
                self._save()
            elif key == "l":
                self._load()
            elif key == "tab":
                self.state = GameState.SELECT_QUEST
            elif key == "space":
                self._attack()
            if key == "e":
                for npc in self.npcs:
                    if npc.can_interact(self.player.position):
                        self.current_dialogue = npc.interact()
        elif state is GameState.PAUSED:
            if key == "escape":
                self.state = GameState.PLAYING
            elif key == "q":
                self.running = False
        elif state is GameState.SELECT_QUEST:
            if key == "tab":
                self.state = GameState.PLAYING
            elif key == "down":
                self.quest_selector.next()
            elif key == "up":
                self.quest_selector.prev()
        elif state is GameState.GAME_OVER:
            if key == "enter":
                self._restart()
            elif key == "escape":
                self.running = False

    # --- logic -----------------------------------------------------------

    def update(self, dt: float, keys: Collection[str] = frozenset()) -> None:
        """Advance the game by ``dt`` seconds with ``keys`` held down."""
        self._since_hit += dt
        self._since_notice += dt
        if self._since_notice > NOTICE_SECONDS:
            self.show_save_notice = False
            self.show_load_notice = False

        if self.state is not GameState.PLAYING:
            return

        self.player.update(dt, keys)
        for enemy in self.enemies:
            if enemy.alive:
                enemy.update(dt)
        for npc in self.npcs:
            npc.update(dt)
        self.quests.update()

        if self.player.health <= 0:
            self.state = GameState.GAME_OVER

        for enemy in self.enemies:
            if not enemy.alive:
                continue
            if _distance(enemy.position, self.player.position) < HIT_RANGE:
                if self._since_hit > HIT_COOLDOWN:
                    self.player.health -= HIT_DAMAGE
                    _play(self._hit_sound)
                    self._since_hit = 0.0

        for item in self.collectibles:
            if item.picked:
                continue
            if _distance(item.position, self.player.position) < PICKUP_RANGE:
                _play(self._pickup_sound)
                item.picked = True
                self.score += PICKUP_SCORE

    # --- drawing ---------------------------------------------------------

    def _draw_notices(self, surface) -> None:
        if not self._since_notice < NOTICE_SECONDS:
            return
        if self.show_save_notice:
            _draw_text(surface, self.fonts, "¡Progreso guardado!", 28, GREEN, (500, 600))
        if self.show_load_notice:
            _draw_text(surface, self.fonts, "¡Progreso cargado!", 28, CYAN, (500, 630))

    def _draw_playing(self, surface) -> None:
        for texture, position in self.scenery:
            if texture is not None:
                surface.blit(texture, position)
        for enemy in self.enemies:
            if enemy.alive:
                enemy.draw(surface)
        for npc in self.npcs:
            npc.draw(surface)
        self.player.draw(surface)

        for item in self.collectibles:
            if not item.picked:
                x, y = item.position
                centre = (int(x) + COLLECTIBLE_RADIUS, int(y) + COLLECTIBLE_RADIUS)
                pygame.draw.circle(surface, YELLOW, centre, COLLECTIBLE_RADIUS)

        draw_hud(surface, self.fonts, self.player.health, 100.0, self.player.faith, 100.0)
        draw_quest_hud(surface, self.fonts, self.quests)
        self._draw_notices(surface)

        if self.current_dialogue:
            panel = pygame.Surface((800, 60), pygame.SRCALPHA)
            panel.fill((0, 0, 0, 180))
            surface.blit(panel, (240, 600))
            _draw_text(surface, self.fonts, self.current_dialogue, 28, WHITE, (250, 610))

    def draw(self, surface) -> None:
        """Draw the current screen onto ``surface``."""
        surface.fill(BACKGROUND)
        state = self.state
        if state is GameState.MENU:
            self.menu.draw_main_menu(surface)
            _draw_text(
                surface, self.fonts, "S: Guardar | L: Cargar | O: Opciones", 22, WHITE, (320, 500)
            )
            self._draw_notices(surface)
        elif state is GameState.OPTIONS:
            self.options_menu.draw(surface)
        elif state is GameState.PLAYING:
            self._draw_playing(surface)
        elif state is GameState.PAUSED:
            self.menu.draw_pause_menu(surface)
        elif state is GameState.SELECT_QUEST:
            self.quest_selector.draw(surface)
        elif state is GameState.GAME_OVER:
            self.game_over_screen.draw(surface, self.score)


_KEY_NAMES = {
    pygame.K_RETURN: "enter",
    pygame.K_KP_ENTER: "enter",
    pygame.K_ESCAPE: "escape",
    pygame.K_SPACE: "space",
    pygame.K_TAB: "tab",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}

_MOVE_KEYS = {"w": pygame.K_w, "a": pygame.K_a, "s": pygame.K_s, "d": pygame.K_d}


def _key_name(key: int) -> Optional[str]:
    if key in _KEY_NAMES:
        return _KEY_NAMES[key]
    name = pygame.key.name(key)
    return name if len(name) == 1 else None


def _start_music() -> None:
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(MUSIC_PATH)
        pygame.mixer.music.set_volume(0.7)
        pygame.mixer.music.play(-1)
    except (OSError, pygame.error) as exc:
        print(f"No se pudo cargar la música de fondo: {exc}", file=sys.stderr)


def main(argv=None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="maria", description="Play MarIA.")
    parser.add_argument("--save", default=DEFAULT_SAVE_PATH, help="save file path")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Maria Game")
        resources = ResourceManager()

        def fonts(size: int):
            return resources.load_font(FONT_PATH, size)

        try:
            fonts(12)
        except (OSError, pygame.error):
            print("No se pudo cargar la fuente PressStart2P-Regular.ttf", file=sys.stderr)
            return -1

        _start_music()
        game = Game(resources, fonts, args.save)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(_key_name(event.key))
            dt = clock.tick(FRAME_RATE) / 1000.0
            pressed = pygame.key.get_pressed()
            held = {name for name, code in _MOVE_KEYS.items() if pressed[code]}
            game.update(dt, held)
            game.draw(screen)
            pygame.display.flip()
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())