# puzzlerack

A small collection of solvers for classic programming-contest puzzles.
Most puzzles come with two independent approaches (for example depth first
versus breadth first, or an ordered board versus a heap) that agree on the
answer. Every puzzle also has a command that reads the puzzle from standard
input and prints the answer in the usual judge format.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Puzzles

| Command            | Module                        | What it solves                                              |
|--------------------|-------------------------------|-------------------------------------------------------------|
| `another-game`     | `puzzlerack.another_game`     | Coin-pile game: does the first or second player win?        |
| `counting-rooms`   | `puzzlerack.counting_rooms`   | Count connected floor regions in a `.`/`#` map              |
| `finding-borders`  | `puzzlerack.finding_borders`  | All border lengths of a string                              |
| `hanoi`            | `puzzlerack.hanoi`            | Tower of Hanoi move list                                    |
| `increasing-array` | `puzzlerack.increasing_array` | Fewest +1 steps to make an array non-decreasing             |
| `josephus`         | `puzzlerack.josephus`         | Elimination order when every second child leaves the circle |
| `movie-festival`   | `puzzlerack.movie_festival`   | Most non-overlapping films one can watch                    |
| `room-allocation`  | `puzzlerack.room_allocation`  | Fewest hotel rooms and a room for each guest                |
| `subordinates`     | `puzzlerack.subordinates`     | Number of subordinates of every employee                    |
| `two-sets`         | `puzzlerack.two_sets`         | Split 1..n into two sets of equal sum                       |

## Command-line use

Each command reads the puzzle from standard input and takes no options
besides `--help`:

```
$ printf '7\n' | josephus
2 4 6 1 5 3 7

$ printf 'abcababcab\n' | finding-borders
2 5

$ printf '7\n' | two-sets
YES
3
7 6 1
4
5 4 3 2
```

Input formats:

- `another-game`: number of games; then for each game a line with the pile
  count and a line with the pile sizes. Prints `first` or `second` per game.
- `counting-rooms`: `rows cols`, then the map rows.
- `finding-borders`: one word.
- `hanoi`: the ring count. Prints the move count followed by one `from to`
  line per move (pillars 1, 2, 3; rings go from 1 to 3), and reports how
  long the recursive and iterative solvers took on standard error.
- `increasing-array`: the element count, then the values.
- `josephus`: the number of children.
- `movie-festival`: the film count, then one `start finish` line per film.
- `room-allocation`: the booking count, then one `checkin checkout` line per
  guest. Prints the rooms needed, then the room of each guest in input order.
- `subordinates`: the employee count, then (for more than one employee) the
  boss of employees 2..n. Prints the count for employees 1..n.
- `two-sets`: n. Prints `NO`, or `YES` followed by the size and members of
  each set.

Missing or malformed input raises `ValueError`.

## Library use

```python
from puzzlerack.another_game import light_seeker, light_merger
from puzzlerack.counting_rooms import parse_blueprint, count_with_diver, count_with_sweeper
from puzzlerack.finding_borders import ribbon_tracer, ribbon_checker
from puzzlerack.hanoi import RingMove, move_count, ring_shifter, ring_machine
from puzzlerack.increasing_array import lift_blocks
from puzzlerack.josephus import ring_counter, champion_finder
from puzzlerack.movie_festival import screen_scheduler, film_sweeper
from puzzlerack.room_allocation import HotelResult, hotel_desk, checkout_queue, verify_hotel
from puzzlerack.subordinates import build_org_chart, branch_counter, queue_counter
from puzzlerack.two_sets import TrayResult, tray_filler, tray_builder, verify_trays

light_seeker([1, 2, 3])                        # "first"
count_with_sweeper(parse_blueprint(["#.#.#"])) # 2
ribbon_tracer(b"aabaa")                        # [1, 2]
move_count(3)                                  # 7
ring_machine(1, "A", "C", "B")                 # [RingMove(source='A', dest='C')]
lift_blocks([3, 2, 5, 1, 7])                   # 5
ring_counter(5)                                # [2, 4, 1, 5, 3]
champion_finder(6)                             # 5
screen_scheduler([(3, 5), (1, 4), (4, 7), (6, 9)])  # 2

bookings = [(1, 3), (2, 5), (4, 6)]
result = checkout_queue(bookings)
result.rooms_needed                            # 2
verify_hotel(bookings, result)                 # True

chart = build_org_chart(5, [(1, 2), (1, 3), (2, 4), (3, 5)])
queue_counter(5, chart)                        # [0, 4, 1, 1, 0, 0], indexed by employee id
branch_counter(chart)                          # same counts

trays = tray_filler(7)                         # TrayResult(tray_a=[7, 6, 1], tray_b=[5, 4, 3, 2])
verify_trays(trays)                            # True
tray_filler(5)                                 # None: no equal split exists
```

Notes:

- `ribbon_tracer` and `ribbon_checker` accept any sequence (a `str`,
  `bytes` or list).
- `lift_blocks` starts its running floor at zero, so negative leading values
  are lifted to zero.
- `ring_shifter` and `ring_machine` return lists of `RingMove` records, whose
  `str()` is `"source dest"`; a negative ring count raises `ValueError`.
- Subordinate counts are lists indexed from 1; index 0 is unused.

The paired functions (`light_seeker`/`light_merger`,
`count_with_diver`/`count_with_sweeper`, `ribbon_tracer`/`ribbon_checker`,
`ring_shifter`/`ring_machine`, `screen_scheduler`/`film_sweeper`,
`hotel_desk`/`checkout_queue`, `branch_counter`/`queue_counter`,
`tray_filler`/`tray_builder`) solve the same puzzle by different means and
agree on the answer.

## What it does not do

The commands read only standard input and print plain text; they do not read
files, and apart from the timings printed by `hanoi` there is no
benchmarking tool. Each command uses one approach of its pair; the other is
available from the library only.