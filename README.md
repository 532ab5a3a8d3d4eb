# blockdrop

blockdrop is a falling-block puzzle game. Pieces drop onto a 10 × 20 board, and you move and rotate them to fill complete rows. When a row is full, it explodes column by column and the board shakes. After each clear, pieces fall a little faster, down to a fixed minimum delay. The five best scores are kept on a leaderboard.

## Installing

```
pip install .
```

This also installs pygame. The game uses it for its window, drawing and sound.

## Playing

```
blockdrop
```

The command takes two options:

- `--resources DIR`: the directory that holds the assets. The default is `resources`.
- `--scores FILE`: the high-score file. The default is `scores.txt` inside the resource directory.

The game opens an 800 × 600 window. The main menu offers **Play**, **About**, **Leaders board** and **Exit**. Choosing **Exit** fades out the menu music for one second and then closes the window.

Each game starts with a "3, 2, 1, Go!" countdown. The controls are:

- **Left / Right**: move the piece sideways.
- **Down**: move the piece down one row. While the key is held, a fire trail is drawn under the piece.
- **Up**: rotate the piece clockwise. Several wall-kick offsets are tried before the rotation is given up.

The panel on the right shows your score and the next piece. It has three buttons:

- **Pause / Play**: pause the game and its music, or resume them.
- **Home**: go back to the menu.
- **Retry**: start a new game straight away.

Points for rows cleared at once:

| Rows | Points |
|------|--------|
| 1    | 100    |
| 2    | 300    |
| 3    | 500    |
| 4    | 800    |

The game is over when a newly spawned piece overlaps locked blocks. The final score is shown for three seconds. If it earns a place in the top five, the game asks for your name on the console, not in the window, and saves the score.

## Resources

The resource directory must hold these files:

- font: `Arial.ttf`
- music: `Menu_Music.ogg` and `GamePlayMusic.ogg`
- sounds: `SwitchPage.wav`, `MouseClick.wav`, `BeforeExplosion.wav`, `ClearLineExplosion.wav`, `LockPiecec.wav`, `3Count.wav`, `2Count.wav`, `1Count.wav` and `GoCount.wav`
- images: `menuBackGroundPic.jpeg`, `aboutPageBGPic.jpeg`, `TetrisBlockExplosion.png`, `GameOverSign.png`, `MovingDownFastNew.png`, `BarBG.png` and `Buttons.png`

`blockdrop.game.load_resources` loads these files in a fixed order. At the first file that fails, it logs the error, stops loading and returns `False`.

If no audio device is available, sound effects are replaced by silent stand-ins and music is tracked without being played.

## Using it as a library

The board and piece logic does not need a window, so you can drive it from code:

```python
from blockdrop.board import Board
from blockdrop.constants import Patterns
from blockdrop.pieces import create_pattern

board = Board((800, 600))
piece = create_pattern(Patterns.T)
piece.move_left(board)
piece.rotate(board)
rows = board.lock_piece(piece)
print(board.find_full_lines(rows))
```

`random_pattern(rng)` returns a piece chosen at random, using the given `random.Random` or the `random` module.

The `blockdrop.leaderboard` module reads and writes score files. Each line has the form `name:score`.

- `load_scores(path)` returns at most five `ScoreEntry` objects, highest score first. Lines that cannot be parsed are skipped. A missing file gives an empty list.
- `save_scores(path, scores)` overwrites the file with the given entries.
- `is_high_score(scores, score)` says whether a score earns a place in the list.
- `insert_score(scores, entry)` returns a new ranked list with the entry added, trimmed to five.

The timers in `blockdrop.timers` (`DelayTimer` and `GravityTimer`) and `ShakeManager` in `blockdrop.shake` can be given their own clock or random generator. This makes them easy to drive in tests.

## What it does not do

- The window has a fixed size. Resizing is not handled.
- High-score names are typed on the console; there is no in-window name entry.
- The leaderboard keeps only the top five scores, in a plain text file.