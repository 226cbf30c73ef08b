# gamealgos

Small, readable algorithms of the kind used in game programming. The package has no dependencies outside the standard library.

## Modules

### `gamealgos.hashtable`

- `GameObject` is a dataclass with a `name` and a `health` value.
- `GameObjectTable` is a fixed-size hash table with ten buckets. Objects are placed by a hash of their name. Objects whose names land in the same bucket are chained together in that bucket.
  - `insert(obj)` appends an object to its bucket.
  - `find(key)` returns the first object with that name, or `None`.
  - `format_table()` renders each bucket as a line of the form `[i]: name (health) ...`.
  - `buckets` is a read-only tuple view of the buckets.
  - `len(table)` counts the stored objects, and iterating the table yields every object in bucket order.

### `gamealgos.sorting`

- `bubble_sort`, `selection_sort` and `insertion_sort` each return a new sorted list and leave their input unchanged.
- `linear_search(values, target)` returns the first index of `target`, or `-1` if it is absent.
- `binary_search(values, target)` searches a sorted sequence and returns an index of `target`, or `-1` if it is absent.

### `gamealgos.collision`

- `AABB(x, y, width, height)` is an axis-aligned box. `(x, y)` is its upper-left corner and y grows upwards. Its edges are available as the properties `left`, `right`, `top` and `bottom`.
- `Circle(x, y, radius)` is a circle given by its centre and radius.
- `clamp(value, low, high)` limits a value to the range `[low, high]`.
- `is_colliding(a, b)` accepts any pairing of boxes and circles.
  - Two boxes collide only when they overlap with positive area.
  - A circle collides with a circle or a box when the two overlap or touch.
  - Any other type raises `TypeError`.

### `gamealgos.pathfinding`

- `bfs(graph, start)` searches a graph given as a mapping of node to neighbours. It returns a dict that maps each reachable node to its breadth-first path from `start`.
- `dijkstra(graph, start)` searches a graph given as a mapping of node to `(neighbour, weight)` pairs. It returns `(distance, previous)`:
  - `distance` gives the cost of the cheapest route to each node, or `math.inf` if the node cannot be reached.
  - `previous` records which node each reached node was reached from.
  - If `start` is not in the graph, it raises `KeyError`.
- `reconstruct_path(previous, start, node)` turns `previous` into a list of nodes from `start` to `node`. It returns `None` when there is no such path.
- `heuristic(x1, y1, x2, y2)` is the Manhattan distance between two cells.
- `astar(grid, start, goal)` finds a shortest 4-connected route through the cells of a grid.
  - Cells equal to `0` are open and every other cell is blocked.
  - It returns the route as a list of `(row, column)` cells, or `None` if there is no route.
  - It raises `ValueError` for an empty grid, and for a start or goal that lies outside the grid.

## Installation

```
pip install .
```

To also get the test requirements, install with `pip install .[test]`, then run `pytest`.

## Usage

```python
from gamealgos.hashtable import GameObject, GameObjectTable
from gamealgos.sorting import insertion_sort, binary_search
from gamealgos.collision import AABB, Circle, is_colliding
from gamealgos.pathfinding import bfs, dijkstra, reconstruct_path, astar

table = GameObjectTable()
table.insert(GameObject("Katniss", 54))
print(table.find("Katniss"))                    # GameObject(name='Katniss', health=54)
print(table.format_table())

values = insertion_sort([5, 4, 8, 2, 3, 1])     # [1, 2, 3, 4, 5, 8]
print(binary_search(values, 3))                 # 2

box = AABB(x=1, y=2, width=1, height=1)
print(is_colliding(Circle(x=2.5, y=1, radius=1), box))   # True

print(bfs({"A": ["B"], "B": ["A"]}, "A")["B"])  # ['A', 'B']

weighted = {"A": [("B", 4), ("C", 2)], "B": [("D", 1)], "C": [("B", 1)], "D": []}
distance, previous = dijkstra(weighted, "A")
print(distance["D"], reconstruct_path(previous, "A", "D"))   # 4 ['A', 'C', 'B', 'D']

print(astar([[0, 0], [1, 0]], (0, 0), (1, 1)))  # [(0, 0), (0, 1), (1, 1)]
```

## Demonstrations

Each module has a command that prints the results of a worked example:

```
gamealgos-hashtable
gamealgos-sorting
gamealgos-collision
gamealgos-pathfinding [bfs|dijkstra|astar]
```

- `gamealgos-sorting` also prints how many nanoseconds each sort and search took.
- `gamealgos-pathfinding` runs the Dijkstra example unless another demonstration is named. The Dijkstra example prints its report in Swedish.

## Limitations

- The hash table always has ten buckets. It never resizes and cannot remove objects.
- The commands only run their fixed examples. None of them reads input.