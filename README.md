# gridrunner

A small side-scrolling platformer laid out on a 64×64 pixel grid. You run and
jump across tiles and shoot enemies that pace back and forth. You pick the level
from a menu. The game is built on a small entity-component system. Entities
carry components such as `CTransform`, `CBoundingBox`, `CGravity` and
`CAnimation`. Each frame, the systems move those entities, collide them and
animate them.

## Installing

```
pip install .
```

The game draws with pygame.

## Running

From a directory that holds a `config/` folder, run:

```
gridrunner
```

The command reads `config/config.txt`, or the path you give as its first
argument. It opens a window titled "Game" at the configured size and frame
limit, loads the font and textures, and shows the level menu. The menu offers
two levels, read from `config/levelPath.txt` and `config/levelPath2.txt`.
Closing the window ends the game.

### Engine configuration

The configuration file is a sequence of words separated by whitespace:

```
Window <width> <height> <frame-limit> <fullscreen 0|1>
Font <name> <path> <size> <r> <g> <b>
Tile <name> <image path>
Player <name> <image path>
Enemy <name> <image path>
Bullet <name> <image path>
Background <name> <image path>
```

The `Window` line must come first. The `Font` line, if present, must come right
after it. The font is registered as `Font_<name>`, and its file must exist. The
menu draws its text with the font named `Font_Arial`. Each image is registered
as `<Kind>_<name>`, for example `Player_Idle` or `Tile_Ground`. Any other words
are skipped.

A level needs these textures:

- `Background_Background`, stretched to fill the window
- `Player_Idle` (two frames), `Player_Run` (three frames) and `Player_Jump` (one frame)
- `Enemy_<type>` (two frames) for each enemy type the level places
- `Tile_<type>` (one frame) for each tile type the level places
- `Bullet_<type>` (eight frames) for the level's bullet type

The frames of an animation sit side by side in one image of equal-width frames.

### Level files

A level file starts with four settings entries, one for each entity kind:

```
Player <speed> <grid-scale-x> <grid-scale-y> <lifespan>
Tile   <speed> <grid-scale-x> <grid-scale-y> <lifespan>
Enemy  <speed> <grid-scale-x> <grid-scale-y> <lifespan>
Bullet <type> <speed> <grid-scale-x> <grid-scale-y> <lifespan>
```

The grid scale sets the bounding box size in grid cells. Placements follow, one
per line: `<Player|Enemy|Tile> <type> <grid-x> <grid-y>`. Grid cell (0, 0) is the
bottom-left cell of the window. A level must place a player.

## Playing

Menu:

| Key | Action |
| --- | --- |
| W / S | move the selection up or down (it wraps around) |
| Enter | load the selected level |

In a level:

| Key | Action |
| --- | --- |
| A / D | run left or right (only on the ground) |
| W | jump (only from the ground) |
| Left mouse button | shoot one bullet per click |
| P (hold) | pause |
| C (hold) | show bounding boxes |
| G (hold) | show the grid |
| Escape | return to the menu |

Entities with gravity fall until they land on a tile. Enemies walk at their
configured speed and turn around at window edges and at the sides of tiles.
Bullets are destroyed when they hit a tile or a window edge. A bullet that hits
an enemy destroys itself and the enemy. An enemy that touches the player
destroys the player. Anything that falls below the bottom of the window is
destroyed too. When the player is destroyed, a new player appears at the cell
where the level first placed it.

## What it does not do

The game plays no sound, keeps no score, lives or timer, and saves nothing.
`Assets.add_sound` can load sounds, but the engine never loads or plays any. The
lifespan settings are stored in a `CLifespan` component, but they are never
counted down. In the menu, Escape does nothing, so close the window to quit.
The T key is bound to `TOGGLE_TEXTURE`, which has no effect.

## Using the pieces

You can also use the building blocks on their own, without a window:

```python
from gridrunner.entity_manager import EntityManager
from gridrunner.components import CTransform, CBoundingBox, CState
from gridrunner.vec2 import Vec2
from gridrunner.collision import collide_all

manager = EntityManager()
tile = manager.add_entity("Tile")
tile.add_component(CTransform(pos=Vec2(32, 32)))
tile.add_component(CBoundingBox(Vec2(64, 64)))
manager.update()  # entities that were added become visible here

collide_all(manager.entities())
```

- `gridrunner.vec2.Vec2`: a 2D vector with component-wise arithmetic, `length()` and `normalize()`.
- `gridrunner.entity.Entity`: holds at most one component of each kind, through `add_component`, `get_component`, `has_component` and `remove_component`. Asking for a component the entity lacks raises `MissingComponentError`.
- `gridrunner.entity_manager.EntityManager`: creates entities with `add_entity(tag)`. New entities appear, and destroyed ones disappear, at the next `update()`. `entities(tag)` lists the live entities, optionally filtered by tag.
- `gridrunner.collision`: `overlap` gives the axis-aligned box overlap, `resolve_collision` handles a single pair, and `collide_all` checks every pair.
- `gridrunner.scene_play.parse_level` and `gridrunner.game_engine.read_config`: parse the two file formats above into `LevelSpec` and `EngineConfig`.

## Tests

```
pip install .[test]
pytest
```