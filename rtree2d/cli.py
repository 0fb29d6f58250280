"""Command-line demonstration of the R-tree queries."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from rtree2d.geometry import Point, Rect
from rtree2d.tree import RTree


def _verdict(found: bool) -> str:
    return "Found" if found else "Not found"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rtree2d",
        description="Build a small R-tree and run region, exact and nearest queries.",
    )
    parser.parse_args(argv)

    tree = RTree()
    for c in range(1, 10, 2):
        tree.insert(Rect.from_coords(c, c, c + 1, c + 1))

    region = Rect.from_coords(2, 2, 5, 5)
    print(f"Objects in region {region}:")
    for rect in tree.search_region(region):
        print(rect)

    exact = Rect.from_coords(3, 3, 4, 4)
    print(f"Exact search for {exact}: {_verdict(tree.search_exact(exact))}")

    point = Point(4.5, 4.5)
    print(f"Nearest to {point}: {tree.nearest_neighbor(point)}")

    tree.remove(exact)
    print(f"After removal, exact search for {exact}: {_verdict(tree.search_exact(exact))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())