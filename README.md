# Dungeon Archeology

You're a researcher who locked yourself in an underground lab to study
ancient crystals. Dig clumps out of the cave next to your laboratory,
collect crystals of varying rarity and appeal, sell them in the museum,
and spend the coins on a better pickaxe.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
dungeon-archeology [--root DIR]
```

`--root` names the directory that holds the `assets/` folder (default: the
current directory). The game reads:

- `assets/rooms.toml`: the room layouts;
- the sprite sheets under `assets/SGQ_Dungeon/` and `assets/SGQ_ui/`;
- the font `assets/Pixeloid_Font_0_5/TrueType/PixeloidSans.ttf`.

These files are not part of the package; they must be supplied separately.

### Controls

| Key / button      | Action                                              |
|-------------------|-----------------------------------------------------|
| `W` `A` `S` `D`   | Move                                                |
| `Shift`           | Run (1.5× speed)                                    |
| Left mouse button | Swing the pickaxe at a clump; press menu buttons    |
| `E`               | Use the upgrader, the museum or the cave rebuilder  |
| `Esc`             | Open the pause menu, or close any open menu         |

### Rules

- The game starts with 110 coins, and digging the cave costs 10 coins,
  including the first cave dug at start-up, so play begins with 100.
  Rebuilding the cave with the lever costs another 10 each time; the balance
  is not checked and can go below zero.
- About 40% of the plain cave floor cells hold a clump. A clump is dug out
  when it is clicked while the player is within 40 pixels of it; it vanishes
  one second later.
- Each clump has a rarity (nothing, common … legendary) and an appeal
  (common … legendary). Clumps that hold nothing are not kept.
- The pickaxe level gives a bonus that can raise a find's rarity by one step
  and raise its price. Levels cost 500, 800, 1200, 2100 and 3400 coins;
  level 5 is the maximum.
- A crystal's price is `int((appeal × 3) ** rarity × 10 × modifier)`.
- In the museum, page through your crystals with the arrow buttons and sell
  them; a sold crystal stays in the list marked "SOLD".

### Room file

`assets/rooms.toml` holds three tables:

```toml
[player_spawn]   # in tiles, relative to the laboratory offset
x = 5
y = 5

[laboratory]
size = { x = 2, y = 2 }     # width and height in tiles
delta = { x = 0, y = 0 }    # offset in tiles
walls = [[0, 1], [0, 0]]    # walls[y][x], tile kinds as WallID values
grounds = [[13, 13], [13, 13]]

[cave]
size = { x = 2, y = 2 }
delta = { x = 10, y = 0 }
walls = [[0, 0], [0, 0]]
grounds = [[0, 0], [0, 0]]
```

`load_rooms` raises `ValueError` when a key is missing, a value has the
wrong type, a size is negative, or a grid is smaller than the size.

## Using it as a library

```python
from dungeon_archeology.core import ClumpRare
from dungeon_archeology.game_manager import rare_to_cost

rare_to_cost(ClumpRare.RARE, ClumpRare.COMMON, 1.0)  # 270
```

`dungeon_archeology.game_manager.GameManager(root)` loads the rooms from
`root/assets/rooms.toml` and holds the whole game state: `coins`,
`inventory`, `clumps`, `player` and `gui`. Its `step(dt, pressed, mouse_pos)`
method advances the game by one frame without opening a window (`pressed`
is a collection of `dungeon_archeology.player.Move` values, `mouse_pos` is
given while the left button is held); `toggle_pause()` and `interact()` do
what `Esc` and `E` do; `run()` opens the window and plays.

Other modules:

- `dungeon_archeology.core`: screen and tile constants, the `WallID`,
  `Material`, `ClumpRare` and `UIMode` enumerations, `Rect` and `Sprite`.
- `dungeon_archeology.wall` and `dungeon_archeology.ground`: tile sprites and
  wall collision.
- `dungeon_archeology.clump`: `ClumpItem`, `Clump`, `DefaultClump`,
  `random_name`, `pick_rarity` and `pick_appeal`.
- `dungeon_archeology.player`: `Player` and `Move`.
- `dungeon_archeology.interactive`: the `Upgrader`, `Museum` and `Updater`
  props.
- `dungeon_archeology.user_interface`: `UserInterface` and the panel helpers
  `nine_slice_tile`, `pieces_to_rect` and `describe_crystal`.
- `dungeon_archeology.render`: `Assets` and `draw_sprite`.

## What it does not do

- It saves nothing: coins, pickaxe level and crystals are lost when the
  window closes.
- The pause menu only shows a title; it has no settings.
- The "Change dungeon" offer in the upgrade menu is shown as "not yet" and
  cannot be bought.
- No sprites, font or room file come with the package.