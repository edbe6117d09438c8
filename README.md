# woolieinvaders

A small pixel-art arcade game built on pygame. You run around a shop laid out
on a grid while invaders wander the aisles. Throw hands at them before the
round timer runs out, and don't let them touch you.

## Installing

```
pip install .
```

This installs the game and its one dependency, pygame.

## Playing

```
woolieinvaders
woolieinvaders --assets path/to/game-data
```

`--assets` names the folder that holds the game's `images/` and `audio/`
folders; it defaults to the current folder. If an image cannot be found the
game logs the error and exits with status 1. Sound effects and music are
optional: when audio cannot be opened or a sound file is missing, the game
plays silently.

The highscore is kept in `SaveData/highscore.txt`, relative to the folder the
game is started from. It is read when a round starts and written when a round
ends with a better score.

The window is 1280×720 and shows the 320×180 pixel-art playfield scaled up.
The frame rate is drawn in the top-right corner.

### Controls

| Key            | Action                                                   |
|----------------|----------------------------------------------------------|
| W / A / S / D  | Move one grid cell north / west / south / east           |
| Space          | Throw a hand in the direction you face                   |
| Escape         | Quit from the main menu; otherwise return to the main menu |
| F11            | Toggle fullscreen                                        |
| Mouse          | Click the menu buttons (Play, Help, Quit, Done)          |

### Rules

- You start with 3 hearts (at most 5) and 6 hands. A thrown hand comes back
  every 1.5 seconds.
- After taking a hit you are shielded for 3 seconds.
- Each round starts with 30 seconds. Clearing a wave adds 15 seconds, and
  every second wave gives back a heart. A clock ticks once 10 seconds or less
  remain.
- Waves grow from 1 invader up to 6: one more every two waves.
- Each kill is worth 10 points times your combo. The combo rises with each
  kill up to x10 and drops back to x1 when you are hit.
- The game ends when you run out of hearts or time; the death screen shows
  why, your score and the highscore.

## What the package does not include

The package holds the game code only. It does not ship the `images/` and
`audio/` files the game draws and plays; they must be provided in the folder
given by `--assets`.

## Development

```
pip install .[test]
pytest
```

The game logic lives in plain classes that can be driven from code:
`woolieinvaders.timer.Timer`, `woolieinvaders.level.LevelGrid`,
`woolieinvaders.entity.GridEntity`, `woolieinvaders.player.Player`,
`woolieinvaders.enemy.Enemy`, `woolieinvaders.projectile.Projectile`,
`woolieinvaders.savedata.HighscoreStore` and `woolieinvaders.app.FpsCounter`.
`woolieinvaders.game.Game` and `woolieinvaders.menu.Menu` load their images
from an asset folder; `woolieinvaders.app.App` also opens the window, and its
`handle_event` and `iterate` methods advance it one event or one frame at a
time.