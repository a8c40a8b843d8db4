# eliteai

A small, dependency-free toolkit for game AI in 2D.

## What is in it

- `eliteai.geometry`: the immutable `Vector2` (`magnitude`, `normalized`,
  `dot`, `cross`, `distance`, ...), the `Winding` enum and the predicates
  `get_polygon_winding`, `is_convex`, `point_in_triangle`,
  `is_point_in_triangle`, `distance_square_point_to_line`,
  `project_on_line_segment`, `is_point_on_line` and
  `is_segment_intersecting_with_circle`.
- `eliteai.shapes`: `Line`, `Triangle` (with the mesh line indices of its
  edges) and `Rect` with `is_overlapping`.
- `eliteai.triangulation`: ear clipping (`ear_clip`) and splicing of holes
  into an outline (`find_mutual_visible_vertices`, `merge_hole`); failures
  raise `TriangulationError`.
- `eliteai.polygon`: `Polygon` with holes (`add_child`, `remove_child`),
  bounds, `triangulate`, `expand_shape`, `orientate_with_children`, and
  triangle queries on the resulting mesh (`triangle_from_position`,
  `closest_triangle_from_position`, `adjacent_triangles`,
  `adjacent_triangles_on_line`, `triangles_from_line_index`).
- `eliteai.graph`: `Graph` (directed or undirected; undirected connections
  are stored in both directions), `GraphNode`, `GraphConnection`, `Color`
  and `TerrainType`.
- `eliteai.grid_graph`: `GridGraph`, `TerrainGridGraph`, `TerrainGraphNode`
  and the cost calculators `ConnectionCostCalculator` and
  `TerrainCostCalculator`. Water cells are never connected.
- `eliteai.search`: `AStar` and `BFS`, with the heuristics `manhattan`,
  `euclidean`, `sq_euclidean`, `octile` and `chebyshev`. `AStar.find_path`
  returns an empty list when there is no path; `BFS.find_path` raises
  `ValueError`.
- `eliteai.eulerian`: `EulerianPath` with `is_connected`, `is_eulerian` and
  `find_path`, which returns the `Eulerianity` and a trail. A
  `random.Random` can be passed in for reproducible results.
- `eliteai.navgraph`: `NavGraph`, a navigation graph with a `NavGraphNode`
  on every mesh line shared by two triangles.
- `eliteai.pathfinding`: `find_path`, `find_path_with_debug` (returning a
  `NavMeshPath` with the A\* node positions and the `Portal`s used),
  `find_portals` and `optimize_portals` (funnel smoothing).
- `eliteai.blackboard`: `Blackboard` (`add_data`, `change_data`, `get_data`;
  missing or duplicate names raise `KeyError`, a change of type raises
  `TypeError`) and the `DecisionMaking` base class.
- `eliteai.behavior_tree`: `BehaviorSelector`, `BehaviorSequence`,
  `BehaviorPartialSequence`, `BehaviorConditional`, `BehaviorAction`,
  `BehaviorInverter` and `BehaviorTree`.
- `eliteai.fsm`: `FSMState`, `FSMCondition` and `FiniteStateMachine`.
- `eliteai.input`: input codes, `KeyboardData`, `MouseData`, `InputAction`
  and `InputManager`, a per-frame queue of actions that answers queries
  such as `is_keyboard_key_down` or `get_mouse_data`.

## Installation

```
pip install .
```

## Examples

Find a path over a grid with A\*:

```python
from eliteai.grid_graph import GridGraph
from eliteai.search import AStar, chebyshev

grid = GridGraph(10, 10, 5, False, True)
astar = AStar(grid, chebyshev)
path = astar.find_path(grid.node_at(0, 0), grid.node_at(9, 9))
print([node.id for node in path])
```

Run a small behaviour tree:

```python
from eliteai.blackboard import Blackboard
from eliteai.behavior_tree import (
    BehaviorAction, BehaviorConditional, BehaviorSequence, BehaviorState, BehaviorTree,
)

board = Blackboard()
board.add_data("hungry", True)

root = BehaviorSequence([
    BehaviorConditional(lambda bb: bb.get_data("hungry")),
    BehaviorAction(lambda bb: BehaviorState.SUCCESS),
])
tree = BehaviorTree(board, root)
tree.update(0.016)
print(tree.current_state)  # BehaviorState.SUCCESS
```

Switch state in a finite state machine:

```python
from eliteai.fsm import FiniteStateMachine, FSMCondition, FSMState

class Always(FSMCondition):
    def evaluate(self, blackboard):
        return True

idle, walk = FSMState(), FSMState()
machine = FiniteStateMachine(idle)
machine.add_transition(idle, walk, Always())
machine.update(0.016)
assert machine.current_state is walk
```

Path through a navigation mesh around an obstacle:

```python
from eliteai.geometry import Vector2
from eliteai.polygon import Polygon
from eliteai.navgraph import NavGraph
from eliteai.pathfinding import find_path

obstacle = Polygon([Vector2(-5, 5), Vector2(5, 5), Vector2(5, -5), Vector2(-5, -5)])
nav = NavGraph([obstacle], 100.0, 100.0, 1.0)
route = find_path(Vector2(-30, 0), Vector2(30, 0), nav)
```

`find_path` returns an empty list when either end lies outside the mesh or
no path exists.

## What it does not do

The package is a library of data structures and algorithms only. It does
not open windows, draw graphs or meshes, run a game loop, simulate physics
or offer an interactive graph editor. `InputManager` does not read a
keyboard or mouse: the caller adds `InputAction`s to it each frame and
flushes it afterwards.

## Running the tests

```
pip install .[test]
pytest
```