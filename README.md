# aisdlab

Two small exercises in one package: shapes drawn on a character screen, and
set and sequence operations on AVL trees.

## Shapes on a character screen

`aisdlab.screen` provides a 150 × 50 character `Screen`. `put_point(x, y)`
blackens one cell and raises `OutOfScreen` when the cell is off the screen;
`put_line(a, b)` draws a straight line between two `Point`s cell by cell;
`is_set(x, y)` tells whether a cell is black; `clear()` and `blacken()` fill
the whole screen; `render()` returns the screen as text, top row first.
`on_screen(x, y)` tells whether a position lies on the screen.

`aisdlab.shapes` defines the abstract `Shape` with its eight anchor points
(`north`, `south`, `east`, `west`, `neast`, `seast`, `nwest`, `swest`) and
`draw`, `move` and `resize`, the `Rotatable` and `Reflectable` mix-ins,
`Line` (with `Line.horizontal(start, length)`), `Rectangle`, a `Scene` whose
`refresh()` clears its screen, draws every shape it holds in order and
returns the rendered picture, and `up(p, q)`, which places shape `p`
directly above shape `q`.

`aisdlab.figures` adds `HalfCircle` (half of a circle inscribed in a
rectangle), `Quad` (a four-cornered figure with crossed diagonals), `Face`
(a rectangle with eyes, a mouth and a nose) and `down(p, q)`, which places
`p` directly below `q`. `build_scene()` creates the figures of a portrait.

Shapes do not stop on errors: when drawing would go off the screen, the
`OutOfScreen` report is written to standard error; when a move takes a point
off the screen, a `CantBeMoved` report is written there instead.

Run the demo, which prints the figures as generated, after rotations and
reflections, and finally assembled, reading one character from standard
input between steps (press Enter):

```
aisdlab-figures
```

## AVL-tree set operations

`aisdlab.avl` holds an AVL tree of `Node`s carrying a key and a sequence
index, with `insert`, `remove`, `find_min` and `remove_min`, traversals
(`preorder`, `inorder_keys`, `sequence_keys`), builders (`build_set_tree`,
`build_sequence_tree`), set operations (`intersection`, `x_or`, `count`,
and `operation` for A ∩ B ⊕ C ∩ D ∩ E) and sequence operations
(`concatenate`, `merge`, `subst`, and `sequence_operation`, which returns the
key lists of all three). `subst` modifies its first tree. `generate_set`
draws distinct random integers from an inclusive range.

```python
from aisdlab.avl import build_sequence_tree, sequence_operation

a = build_sequence_tree([(1, 0), (2, 1), (3, 2), (4, 3), (5, 4)])
b = build_sequence_tree([(4, 0), (5, 1), (6, 2), (7, 3), (8, 4)])
concatenated, merged, substituted = sequence_operation(a, b)
```

`aisdlab.bench` builds five random ten-element set trees per run, times
`operation` on them and prints one `number;nanoseconds` line per run.
`--start` and `--stop` (default 10 and 400) give the range of run numbers,
and `--seed` makes the random sets repeatable:

```
aisdlab-bench --start 10 --stop 20 --seed 1
```

## Tests

```
pip install .[test]
pytest
```