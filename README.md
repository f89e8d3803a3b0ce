# submarine

Solvers for a series of submarine-themed programming puzzles. Each puzzle
lives in its own module, exposes plain functions and classes you can call
from Python, and has a small command that reads a puzzle input file and
prints the answer. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Every command takes the path of a puzzle input file as its only positional
argument. It defaults to `input.txt`, except for `submarine-caves` and
`submarine-origami`, which default to `sample.txt`, and `submarine-position`,
which uses a built-in list of scanner positions when no path is given.
A file that cannot be read, or malformed input, is reported on standard
error with exit status 1.

| Command                  | What it prints                                      | Options                              |
|--------------------------|-----------------------------------------------------|--------------------------------------|
| `submarine-sonar`        | Number of depth increases                           | `--window N` (default 1)             |
| `submarine-navigation`   | Final horizontal position, depth and their product  | `--aim`                              |
| `submarine-diagnostics`  | Power consumption (part 1) or life support (part 2) | `--part {1,2}`                       |
| `submarine-bingo`        | Score of the first (1) or last (2) winning board    | `--part {1,2}`                       |
| `submarine-vents`        | Points covered by two or more vent lines            | `--diagonals`, `--show SIZE`         |
| `submarine-lanternfish`  | Number of lanternfish after some days               | `--days N` (default 80)              |
| `submarine-crabs`        | Cheapest alignment position and its fuel cost       | `--part {1,2}`                       |
| `submarine-segments`     | Count of easy digits (1) or sum of outputs (2)      | `--part {1,2}`                       |
| `submarine-heightmap`    | Low-point risk sum (1) or basin product (2)         | `--part {1,2}`                       |
| `submarine-syntax`       | Syntax error score (1) or middle completion (2)     | `--part {1,2}`                       |
| `submarine-octopus`      | First step at which every octopus flashes           |                                      |
| `submarine-caves`        | Each cave, whether it is small or big, and its links|                                      |
| `submarine-origami`      | The fold instructions and a drawing of the dots     | `--width N`, `--height N`            |
| `submarine-beacons`      | Every distinct beacon and how many there are        |                                      |
| `submarine-position`     | Largest Manhattan distance between positions        |                                      |

For example:

```
submarine-sonar --window 3 input.txt
submarine-syntax --part 2 input.txt
submarine-lanternfish --days 256 input.txt
```

## Using the library

```python
from submarine.sonar import parse_depths, count_increases, count_window_increases
from submarine.syntax import total_syntax_score, middle_completion_score

depths = parse_depths("199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n")
count_increases(depths)            # 7
count_window_increases(depths, 3)  # 5

lines = ["{([(<{}[<>[]}>{[]{[(<()>", "[({(<(())[]>[[{[]{<()<>>"]
total_syntax_score(lines)          # 1197, from the corrupted first line
middle_completion_score(lines)     # 288957, from the incomplete second line
```

The modules and their main entry points:

- `submarine.sonar`: `parse_depths`, `count_increases`, `count_window_increases`.
- `submarine.navigation`: `Command`, `parse_commands`, `navigate`, `navigate_with_aim`.
- `submarine.diagnostics`: `gamma_epsilon`, `power_consumption`, `oxygen_rating`,
  `co2_rating`, `life_support`.
- `submarine.bingo`: `Board` (with `wins`, `unmarked_sum`, `render`), `parse_bingo`,
  `first_winner_score`, `last_winner_score`.
- `submarine.vents`: `Segment`, `parse_segments`, `cover`, `count_overlaps`, `render`.
- `submarine.lanternfish`: `parse_ages`, `age_counts`, `tick`, `fish_count`.
- `submarine.crabs`: `parse_positions`, `linear_cost`, `triangular_cost`, `best_alignment`.
- `submarine.segments`: `count_unique_outputs`, `solve_wiring`, `decode_entry`, `sum_outputs`.
- `submarine.heightmap`: `HeightMap` (with `from_text`, `low_points`, `risk_sum`,
  `basin`, `basin_sizes`, `basin_product`).
- `submarine.syntax`: `SyntaxCheckError`, `first_illegal`, `syntax_score`,
  `total_syntax_score`, `completion`, `completion_score`, `middle_completion_score`.
- `submarine.octopus`: `OctopusGrid` (with `from_text`, `step`, `all_flashed`,
  `first_synchronized_step`, `render`).
- `submarine.caves`: `Cave` (with `connect`, `can_enter`), `parse_caves`.
- `submarine.origami`: `Axis`, `Fold`, `parse_manual`, `render`.
- `submarine.position`: `Position` (with `parse`, `distance`, `manhattan`,
  `describe_distance`), `largest_manhattan`.
- `submarine.beacons`: `rotations`, `Scanner` (with `add_beacon`, `beacons`, `locate`
  and friends), `parse_scanners`, `assemble`, `format_beacons`.

Malformed input raises `ValueError` (or its subclass `SyntaxCheckError`).

## What the package does not do

- `submarine.caves` only reads the cave map into `Cave` objects; it does not
  count or list paths through the cave system.
- `submarine.origami` only reads the dots and fold instructions and draws the
  unfolded sheet; it does not carry out the folds.
- `submarine.octopus` answers only the "first synchronized step" question; the
  running total of flashes is available as `OctopusGrid.flash_count`, but no
  command reports the total after a fixed number of steps.
- `submarine.beacons` counts distinct beacons; it does not report the largest
  distance between the placed scanners. `submarine-position` computes that
  distance for a list of positions you supply.