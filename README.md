# maria

A small top-down role-playing game built on pygame. You walk through a
landscape, talk to a villager, fight enemies, pick up collectibles for
points and complete a quest. Progress can be saved to and loaded from a
plain-text save file.

## Installing

```
pip install .
```

The game looks for an `assets/` directory in the working directory holding
its font, textures, music and sound effects, for example
`assets/fonts/PressStart2P-Regular.ttf`,
`assets/textures/player_sheet.png`, `assets/textures/enemy_sheet.png`,
`assets/textures/npc_sheet.png`, `assets/music/music 1.ogg`,
`assets/sounds/hit.wav` and `assets/sounds/pickup.wav`. A missing texture,
music track or sound effect is reported on standard error and the game runs
without it; a missing font stops the game with exit status -1.

## Playing

```
maria
maria --save path/to/save.txt
```

`--save` chooses the save file; it defaults to `save.txt` in the working
directory. The window opens at 1280x720 and runs at 60 frames per second,
with the background music looping at 70% volume.

| Screen        | Key        | Action                                |
|---------------|------------|---------------------------------------|
| Main menu     | Enter      | Start playing                         |
|               | O          | Options                               |
|               | L          | Load the saved game                   |
| Options       | Left/Right | Choose a resolution                   |
|               | Esc        | Back to the main menu                 |
| Playing       | W A S D    | Move                                  |
|               | Space      | Attack nearby enemies                 |
|               | E          | Talk to a nearby villager             |
|               | S          | Save the game                         |
|               | L          | Load the saved game                   |
|               | Tab        | Open the quest selector               |
|               | Esc        | Pause                                 |
| Paused        | Esc        | Resume                                |
|               | Q          | Quit                                  |
| Quest list    | Up/Down    | Move the selection                    |
|               | Tab        | Back to the game                      |
| Game over     | Enter      | Reset and return to the main menu     |
|               | Esc        | Quit                                  |

Closing the window also quits.

Standing within 50 pixels of a living enemy costs 10 health, at most once
every half second. Each attack deals 20 damage to every living enemy within
60 pixels; enemies start with 30 health and die at zero. Walking within 40
pixels of a collectible scores 10 points. Talking to the villager steps
through its lines of dialogue. When health reaches zero the game is over;
pressing Enter there restores the player and every enemy and resets the
score. After a save or a load a notice is shown for two seconds.

## What it does not do

- The options screen only records the chosen resolution
  (`OptionsMenu.selected_resolution()`); the window keeps its size.
- Choosing a quest in the quest list has no effect on play.
- Enemies in the game stand still and only animate. `maria.combat` has
  enemies that walk towards the player (`ChasingEnemy`, `CombatSystem`),
  and `maria.screens.Level` draws a background under the characters, but
  the game itself uses neither.
- There is no jumping.

## Using the pieces

The game logic works without opening a window. Textures may be `None`.

```python
from maria.entities import Enemy
from maria.quests import QuestSystem

enemies = [Enemy(), Enemy()]
quests = QuestSystem()
quests.add_quest(
    "Defeat every enemy",
    "Clear the field.",
    lambda: not any(e.alive for e in enemies),
)

for enemy in enemies:
    enemy.alive = False
quests.update()
assert quests.active_quests[0].completed
```

- `maria.entities`: `Player` (moved by `update(dt, keys)` with the held keys
  `"w"`, `"a"`, `"s"`, `"d"`), `Enemy` and `NPC`, each with `save` and `load`.
- `maria.quests`: `Quest` and `QuestSystem`.
- `maria.savegame`: `save_game(player, enemies, npcs, quests, path)` writes
  the player, enemies, villagers and quest progress as whitespace-separated
  text; `load_game(...)` reads it back, resizing the enemy and NPC lists in
  place. It returns `False` when the file cannot be read and raises
  `ValueError` or `EOFError` on malformed contents.
- `maria.textstream.TextReader`: reads numbers and lines from saved text.
- `maria.animation.AnimatedSprite`: cycles the frames of a sprite sheet.
- `maria.resources.ResourceManager`: loads and caches textures, fonts and
  sounds.
- `maria.screens`: the menus, game-over screen, options screen, quest
  selector and HUD drawing.
- `maria.game.Game`: the whole game driven by `handle_key(name)`,
  `update(dt, keys)` and `draw(surface)`.

## Running the tests

```
pip install ".[test]"
pytest
```