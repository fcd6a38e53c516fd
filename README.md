# ddmapgen

`ddmapgen` generates race-map layouts for DDNet-style game servers. A walker
moves across a tile grid from waypoint to waypoint, a brush carves free space
along its path, and mutations change the walker's direction and the brush's
size while the walk runs. An econ client and a few helpers for a vote menu let
a program talk to a running game server.

The only runtime dependency is numpy. Python 3.10 or newer is required.

## Modules

| Module | Purpose |
| --- | --- |
| `ddmapgen.position` | 2D vectors on numpy arrays, `Direction`, distances, angles, neighbour lookup |
| `ddmapgen.random` | Seeded `Random` generator, weighted distributions (`ProbableValue`, `RandomDistConfig`, `RandomDist`), `seed_from_str`, `random_seed` |
| `ddmapgen.brush` | `Brush`: a boolean stamp, optionally circular and rescaled, applied to a tile array |
| `ddmapgen.walker` | `Walker`, `WalkerState`, `NormalWaypoints`: step-by-step movement towards waypoints |
| `ddmapgen.map` | `Map` with physics layers (`LayerKind`), reshaping, filling and trimming |
| `ddmapgen.generator` | `Generator`: ties walker, brush and map together and runs a generation |
| `ddmapgen.mutations.base` | `MutationState` and the abstract `Mutator` |
| `ddmapgen.mutations.brush` | `PulseBrushMutation`, `TransitionBrushMutation` |
| `ddmapgen.mutations.walker` | `StraightWalkerMutation`, `BackwardsWalkerMutation`, `LeftWalkerMutation`, `RightWalkerMutation`, `RandomWalkerMutation` |
| `ddmapgen.pipeline` | `MutationLoop`, `mutate_all`, `reset_all`: chains of mutations in counted or endless loops |
| `ddmapgen.logtags` | `auth`, `recv`, `gen`: ANSI-coloured prefixes for log lines |
| `ddmapgen.econ` | `Econ`: a line-oriented client for a game server's external console |
| `ddmapgen.bridge` | `parse_call`, `build_votes`, `load_configs_from_dir`, `format_config_listing` |

## Positions and directions

Positions are two-element float vectors made with `vector(x, y)`. Directions
turn clockwise with `next`, counter-clockwise with `prev`, and reverse with
`backwards`; `Direction.from_index` maps 0 to 3 to Up, Right, Down, Left and
any other index to Up.

```python
from ddmapgen.position import Direction, vector, euclidian, straight_neighbors

start = vector(0.0, 0.0)
goal = vector(3.0, 4.0)

euclidian(start, goal)       # 5.0
straight_neighbors(start)    # four vectors: up, right, down, left of start

up = Direction.from_index(0)
up.next().backwards() == up.prev()   # True
```

## Generating a map

`Generator.generate` takes waypoints in normalised coordinates, scales them by
`Generator.scale_factor` (1.0 by default), and returns a `Map`. The map starts
solid (tile 1) with a margin of 200 tiles around the waypoints; the brush
writes empty tiles (0) into the game layer along the walker's path. Before
every step an optional hook set with `on_step` is called with the walker, the
map and the brush; that is where mutations steer the walk. The walk ends when
no next state has been set for the walker, or when its state targets the last
waypoint. Afterwards border rows and columns that repeat their neighbour are
trimmed away.

```python
from ddmapgen.generator import Generator
from ddmapgen.mutations.brush import TransitionBrushMutation
from ddmapgen.mutations.walker import StraightWalkerMutation

generator = Generator()
generator.scale_factor = 200.0

grow = TransitionBrushMutation(1, 20, 200)
straight = StraightWalkerMutation(10_000)

def before_step(walker, game_map, brush):
    grow.mutate(brush)
    straight.mutate(walker)

generator.on_step(before_step)

game_map = generator.generate([
    (0.0, 1.0),
    (0.2, 0.8),
    (0.4, 0.6),
    (0.6, 0.4),
    (0.8, 0.2),
    (1.0, 0.0),
])
tiles = game_map.game_layer()   # numpy array indexed as [x, y]
```

Each mutation's `mutate` returns `MutationState.PROCESSING` while it still has
steps left and `MutationState.FINISHED` afterwards, until `reset` is called.
Two walker mutations behave differently: `BackwardsWalkerMutation` reports
finished after every move it makes, and `LeftWalkerMutation` never uses up its
steps.

## Chaining mutations

A `MutationLoop` holds a list of mutations and an optional `count`.
`mutate_all(mutant, loops)` advances every loop by one step: within a loop,
mutations run in order until one is still processing. A counted loop spends
one unit of its count per call and does nothing at zero. A loop without a count
is reset and its first mutation run again whenever its last mutation reports
finished. `reset_all(loops)` resets every mutation of every loop.

## Seeded randomness

```python
from ddmapgen.random import Random, seed_from_str

rng = Random(seed_from_str("my favourite map"))
first = rng.gen_u64()
rng.reset()
rng.gen_u64() == first   # True: the same seed replays the same sequence
```

`Random` also offers `in_range`, `gen_bool`, `gen_normal`, `pick`, `skip`,
`skip_n`, and weighted sampling with `sample_index` and `sample_value` over a
`RandomDist`.

## Talking to a game server

`Econ.connect("127.0.0.1:8303")` opens a TCP connection, waiting at most ten
seconds. `auth(password)` waits for the `Enter password:` prompt, sends the
password and returns whether the server answered with a successful
authentication. `read` receives one chunk and splits it into lines,
keeping a trailing partial line for the next chunk; `pop_line` hands back the
most recent complete line, or None. `send_rcon_cmd` sends one command line.
`feed(data)` runs bytes through the same line splitter without a socket. An
`Econ` is a context manager that closes its connection on exit.

The bridge helpers build and interpret a vote menu:

- `load_configs_from_dir(path)` reads every file in a directory as JSON into a
  dict keyed by file name with `.json` removed;
- `build_votes(version, generator, walker, waypoints, generator_names,
  walker_names, waypoints_names)` returns `(description, command)` pairs: a
  title, the current configurations, a "Generate Random Map" entry, and one
  "Set ... configuration" entry per available name, separated by blank votes;
- `parse_call(line)` returns the arguments of an `echo call ...` line from
  console output, or None when the line is not such a call;
- `format_config_listing(...)` renders the available configuration names, one
  kind per line.

## What the package does not do

- It has no command-line program and installs no commands.
- It does not write map files in the game's binary map format; a generated
  `Map` exists only as numpy tile arrays in memory.
- It does not run a bridge service: there is no loop that listens to the
  server, regenerates maps on a vote and switches the server to them. The
  econ client and vote helpers are the pieces such a program would use.
- It has no graphical editor or map viewer.