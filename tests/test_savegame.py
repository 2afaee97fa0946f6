import pytest

from maria.entities import NPC, Enemy, Player
from maria.quests import QuestSystem
from maria.savegame import load_game, save_game


def _world():
    player = Player(None)
    first = Enemy()
    first.init(None, (700, 400))
    second = Enemy()
    second.init(None, (900, 500))
    npc = NPC()
    npc.init(None, (400, 400), ["¡Hola!", "¡Buen trabajo!", "¡Chau!"])
    quests = QuestSystem()
    quests.add_quest(
        "Derrota a todos los enemigos",
        "Acaba con todos los enemigos en pantalla.",
        lambda: False,
    )
    return player, [first, second], [npc], quests


def test_first_line_holds_player_state(tmp_path):
    player, enemies, npcs, quests = _world()
    path = tmp_path / "save.txt"
    save_game(player, enemies, npcs, quests, path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "100 400 100 100"
    assert lines[1] == "2"


def test_round_trip_restores_everything(tmp_path):
    player, enemies, npcs, quests = _world()
    player.position = (150.5, 320.0)
    player.health = 70.0
    player.faith = 40.0
    enemies[0].health = 10.0
    enemies[1].alive = False
    npcs[0].interact()
    quests.active_quests[0].completed = True
    path = tmp_path / "save.txt"
    save_game(player, enemies, npcs, quests, path)

    new_player, new_enemies, new_npcs, new_quests = _world()
    new_enemies.clear()
    new_npcs.clear()
    assert load_game(new_player, new_enemies, None, new_npcs, None, new_quests, path)

    assert new_player.position == player.position
    assert new_player.health == player.health
    assert new_player.faith == player.faith
    assert [e.position for e in new_enemies] == [e.position for e in enemies]
    assert [e.health for e in new_enemies] == [e.health for e in enemies]
    assert [e.alive for e in new_enemies] == [True, False]
    assert new_npcs[0].dialogues == npcs[0].dialogues
    assert new_npcs[0].current_dialogue == npcs[0].current_dialogue
    assert new_quests.active_quests[0].completed is True
    assert new_quests.active_quests[0].title == quests.active_quests[0].title


def test_load_shrinks_lists_to_saved_counts(tmp_path):
    player, enemies, npcs, quests = _world()
    path = tmp_path / "save.txt"
    save_game(player, enemies[:1], [], quests, path)
    assert load_game(player, enemies, None, npcs, None, quests, path)
    assert len(enemies) == 1
    assert npcs == []


def test_load_keeps_quest_checker(tmp_path):
    player, enemies, npcs, quests = _world()
    path = tmp_path / "save.txt"
    save_game(player, enemies, npcs, quests, path)
    checker = quests.active_quests[0].check_completion
    assert load_game(player, enemies, None, npcs, None, quests, path)
    assert quests.active_quests[0].check_completion is checker


def test_extra_saved_quests_are_ignored(tmp_path):
    player, enemies, npcs, quests = _world()
    quests.add_quest("Otra", "Mas", lambda: True)
    path = tmp_path / "save.txt"
    save_game(player, enemies, npcs, quests, path)
    target = QuestSystem()
    assert load_game(player, enemies, None, npcs, None, target, path)
    assert target.active_quests == []


def test_missing_file_returns_false(tmp_path):
    player, enemies, npcs, quests = _world()
    assert not load_game(player, enemies, None, npcs, None, quests, tmp_path / "none.txt")
    assert len(enemies) == 2


def test_truncated_file_raises(tmp_path):
    path = tmp_path / "save.txt"
    path.write_text("100 400\n", encoding="utf-8")
    player, enemies, npcs, quests = _world()
    with pytest.raises(EOFError):
        load_game(player, enemies, None, npcs, None, quests, path)


def test_save_to_unwritable_path_raises(tmp_path):
    player, enemies, npcs, quests = _world()
    with pytest.raises(OSError):
        save_game(player, enemies, npcs, quests, tmp_path / "missing" / "save.txt")