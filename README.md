# rtree2d

An in-memory R-tree that indexes axis-aligned rectangles in the plane. It
supports insertion, removal, region queries, exact-match lookup and
nearest-neighbour search.

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install ".[test]"
```

## Usage

```python
from rtree2d.geometry import Point, Rect
from rtree2d.tree import RTree

tree = RTree()
for i in range(1, 10, 2):
    tree.insert(Rect.from_coords(i, i, i + 1, i + 1))

region = Rect.from_coords(2, 2, 5, 5)
for rect in tree.search_region(region):
    print(rect)

print(tree.search_exact(Rect.from_coords(3, 3, 4, 4)))   # True
print(tree.nearest_neighbor(Point(4.5, 4.5)))

tree.remove(Rect.from_coords(3, 3, 4, 4))                # True
print(tree.search_exact(Rect.from_coords(3, 3, 4, 4)))   # False
```

### Geometry

`rtree2d.geometry` has two frozen dataclasses:

- `Point(x, y)`, printed as `(x,y)`.
- `Rect(low, high)`, built from its lower and upper corner points, printed as
  `(x1,y1)-(x2,y2)`. `Rect.from_coords(x1, y1, x2, y2)` takes two opposite
  corners in either order and puts them in order itself.

A rectangle answers `area()`, `intersects(other)` (touching edges count),
`contains_point(point)`, `contains_rect(other)`, `distance(point)` (Euclidean
distance to the nearest point of the rectangle, zero inside it),
`expanded(other)` (the smallest rectangle covering both) and
`expansion_area(other)` (how much the area grows to cover `other`).

### The tree

`rtree2d.tree.RTree(max_children=4)` holds at most `max_children` entries per
node and splits a node along the x axis when it overflows. A
`max_children` below 1 raises `ValueError`.

- `insert(rect)` adds a rectangle; duplicates are kept.
- `remove(rect)` removes one rectangle equal to `rect` and returns whether
  one was found.
- `search_region(region)` returns a list of every stored rectangle that
  intersects `region`.
- `search_exact(rect)` returns whether a rectangle equal to `rect` is stored.
- `nearest_neighbor(point)` returns the stored rectangle closest to `point`,
  or `None` when the tree is empty.

## Demonstration

Run the bundled demonstration. It builds a small tree, runs a region query,
an exact lookup, a nearest-neighbour query and a removal, and prints what it
finds:

```
rtree2d-demo
```

It takes no options other than `--help`.

## Limitations

The tree lives in memory only: there is no way to save it to a file or load
it back, and the demonstration command cannot be given your own data.

## Running the tests

```
pytest
```