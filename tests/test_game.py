import pygame
import pytest

from maria.game import (
    Collectible,
    Game,
    GameState,
    default_dialogues,
)


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


class FakeResources:
    def __init__(self):
        self.textures = []
        self.sounds = {}

    def load_texture(self, path):
        self.textures.append(path)
        return None

    def load_sound(self, path):
        sound = FakeSound()
        self.sounds[path] = sound
        return sound


class MissingResources:
    def load_texture(self, path):
        raise FileNotFoundError(path)

    def load_sound(self, path):
        raise FileNotFoundError(path)


def no_fonts(size):
    raise AssertionError("fonts are not needed here")


@pytest.fixture
def resources():
    return FakeResources()


@pytest.fixture
def game(resources, tmp_path):
    return Game(resources, no_fonts, tmp_path / "save.txt")


def playing(game):
    game.handle_key("enter")
    return game


def test_default_dialogues():
    assert default_dialogues() == ["¡Hola!", "¡Buen trabajo!", "¡Chau!"]


def test_collectible_starts_unpicked():
    item = Collectible((300.0, 400.0))
    assert item.picked is False
    assert item.position == (300.0, 400.0)


def test_initial_setup(game):
    assert game.state is GameState.MENU
    assert game.player.position == (100, 400)
    assert [e.position for e in game.enemies] == [(700.0, 400.0), (900.0, 500.0)]
    assert game.npcs[0].dialogues == default_dialogues()
    assert game.quests.active_quests[0].title == "Derrota a todos los enemigos"


def test_missing_assets_are_tolerated(tmp_path):
    game = Game(MissingResources(), no_fonts, tmp_path / "save.txt")
    playing(game)
    game.player.position = game.collectibles[0].position
    game.update(0.0)
    assert game.score == 10


def test_menu_to_playing_and_pause(game):
    playing(game)
    assert game.state is GameState.PLAYING
    game.handle_key("escape")
    assert game.state is GameState.PAUSED
    game.handle_key("escape")
    assert game.state is GameState.PLAYING


def test_pause_quit_stops_running(game):
    playing(game)
    game.handle_key("escape")
    game.handle_key("q")
    assert game.running is False


def test_options_cycle_resolutions(game):
    game.handle_key("o")
    assert game.state is GameState.OPTIONS
    game.handle_key("right")
    assert game.options_menu.selected_resolution() == (1600, 900)
    game.handle_key("left")
    game.handle_key("left")
    assert game.options_menu.selected_resolution() == (1920, 1080)
    game.handle_key("escape")
    assert game.state is GameState.MENU


def test_quest_selector_toggle(game):
    playing(game)
    game.handle_key("tab")
    assert game.state is GameState.SELECT_QUEST
    game.handle_key("down")
    assert game.quest_selector.selected == 0
    game.handle_key("tab")
    assert game.state is GameState.PLAYING


def test_attack_kills_nearby_enemy(game):
    playing(game)
    target = game.enemies[0]
    game.player.position = target.position
    game.handle_key("space")
    assert target.alive
    assert target.health < 30.0
    game.handle_key("space")
    assert not target.alive
    assert game.enemies[1].health == 30.0


def test_quest_completes_when_all_enemies_dead(game):
    playing(game)
    for enemy in game.enemies:
        enemy.alive = False
    game.update(0.0)
    assert game.quests.active_quests[0].completed


def test_npc_interaction(game):
    playing(game)
    game.player.position = (400.0, 400.0)
    game.handle_key("e")
    assert game.current_dialogue == "¡Buen trabajo!"


def test_npc_out_of_reach(game):
    playing(game)
    game.handle_key("e")
    assert game.current_dialogue == ""


def test_pickup_scores_once(game, resources):
    playing(game)
    game.player.position = game.collectibles[0].position
    game.update(0.0)
    game.update(0.0)
    assert game.score == 10
    assert game.collectibles[0].picked
    assert not game.collectibles[1].picked
    assert resources.sounds["assets/sounds/pickup.wav"].plays == 1


def test_enemy_contact_respects_cooldown(game, resources):
    playing(game)
    game.player.position = game.enemies[0].position
    game.update(0.1)
    assert game.player.health == 100.0
    game.update(0.5)
    assert game.player.health == 90.0
    game.update(0.1)
    assert game.player.health == 90.0
    assert resources.sounds["assets/sounds/hit.wav"].plays == 1


def test_no_logic_outside_playing(game):
    game.player.position = game.collectibles[0].position
    game.update(1.0)
    assert game.score == 0


def test_game_over_and_restart(game):
    playing(game)
    game.score = 40
    game.enemies[0].alive = False
    game.player.health = 0
    game.update(0.0)
    assert game.state is GameState.GAME_OVER
    game.handle_key("enter")
    assert game.state is GameState.MENU
    assert game.score == 0
    assert game.player.health == 100.0
    assert game.player.position == (100, 400)
    assert all(e.alive and e.health == 30.0 for e in game.enemies)


def test_game_over_escape_quits(game):
    game.state = GameState.GAME_OVER
    game.handle_key("escape")
    assert game.running is False


def test_save_and_load_round_trip(game):
    playing(game)
    game.player.position = (123.0, 321.0)
    game.player.health = 55.0
    game.enemies[1].alive = False
    game.handle_key("s")
    assert game.show_save_notice
    assert game.save_path.exists()

    game.player.position = (0.0, 0.0)
    game.player.health = 1.0
    game.enemies[1].alive = True
    game.state = GameState.MENU
    game.handle_key("l")
    assert game.show_load_notice
    assert game.player.position == (123.0, 321.0)
    assert game.player.health == 55.0
    assert game.enemies[1].alive is False
    assert game.npcs[0].dialogues == default_dialogues()


def test_load_without_save_file(game):
    game.handle_key("l")
    assert game.show_load_notice is False
    assert game.player.position == (100, 400)


def test_notice_expires(game):
    playing(game)
    game.handle_key("s")
    game.update(1.0)
    assert game.show_save_notice
    game.update(1.5)
    assert game.show_save_notice is False


@pytest.fixture
def real_fonts():
    pygame.font.init()
    cache = {}

    def fonts(size):
        if size not in cache:
            cache[size] = pygame.font.Font(None, size)
        return cache[size]

    return fonts


def test_draw_options_background(resources, tmp_path, real_fonts):
    game = Game(resources, real_fonts, tmp_path / "save.txt")
    game.handle_key("o")
    surface = pygame.Surface((1280, 720))
    game.draw(surface)
    assert tuple(surface.get_at((5, 700)))[:3] == (10, 10, 20)


def test_draw_playing_shows_collectible(resources, tmp_path, real_fonts):
    game = Game(resources, real_fonts, tmp_path / "save.txt")
    playing(game)
    surface = pygame.Surface((1280, 720))
    game.draw(surface)
    assert tuple(surface.get_at((316, 416)))[:3] == (255, 255, 0)
    game.collectibles[0].picked = True
    game.draw(surface)
    assert tuple(surface.get_at((316, 416)))[:3] == (10, 10, 20)