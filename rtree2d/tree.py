"""An R-tree over axis-aligned rectangles."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from functools import reduce

from rtree2d.geometry import Point, Rect

# Empty bounds start at the smallest positive double, so a node's lower
# corner never lies above the origin.
_EMPTY_BOUNDS = Rect(
    Point(sys.float_info.min, sys.float_info.min),
    Point(-sys.float_info.max, -sys.float_info.max),
)


class RTreeNode:
    """A node holding either rectangles (leaf) or child nodes."""

    __slots__ = ("bounds", "is_leaf", "children", "objects")

    def __init__(self, is_leaf: bool = False) -> None:
        self.bounds: Rect = _EMPTY_BOUNDS
        self.is_leaf = is_leaf
        self.children: list[RTreeNode] = []
        self.objects: list[Rect] = []

    def add_child(self, child: RTreeNode) -> None:
        self.children.append(child)
        self.bounds = self.bounds.expanded(child.bounds)

    def add_object(self, obj: Rect) -> None:
        self.objects.append(obj)
        self.bounds = self.bounds.expanded(obj)

    def remove_child(self, child: RTreeNode) -> None:
        for index, current in enumerate(self.children):
            if current is child:
                del self.children[index]
                self.recalculate_bounds()
                return

    def remove_object(self, obj: Rect) -> bool:
        """Remove one rectangle equal to ``obj``; return whether one was found."""
        try:
            self.objects.remove(obj)
        except ValueError:
            return False
        self.recalculate_bounds()
        return True

    def recalculate_bounds(self) -> None:
        items = self.objects if self.is_leaf else [c.bounds for c in self.children]
        self.bounds = reduce(Rect.expanded, items, _EMPTY_BOUNDS)

    def is_empty(self) -> bool:
        return not (self.objects if self.is_leaf else self.children)

    def __len__(self) -> int:
        return len(self.objects) if self.is_leaf else len(self.children)


class RTree:
    """A dynamic R-tree with linear splits along the x axis."""

    def __init__(self, max_children: int = 4) -> None:
        if max_children < 1:
            raise ValueError("max_children must be at least 1")
        self.max_children = max_children
        self.min_children = max_children // 2
        self._root = RTreeNode(is_leaf=True)

    def insert(self, obj: Rect) -> None:
        leaf = self._choose_leaf(self._root, obj)
        leaf.add_object(obj)
        if len(leaf.objects) > self.max_children:
            self._split(leaf)
        for ancestor in self._ancestors(leaf):
            ancestor.recalculate_bounds()

    def remove(self, obj: Rect) -> bool:
        """Remove one rectangle equal to ``obj``; return whether one was found."""
        return self._remove_from(self._root, obj)

    def search_region(self, region: Rect) -> list[Rect]:
        """Every stored rectangle that intersects ``region``."""
        return list(self._iter_region(self._root, region))

    def search_exact(self, obj: Rect) -> bool:
        return self._contains(self._root, obj)

    def nearest_neighbor(self, point: Point) -> Rect | None:
        """The stored rectangle closest to ``point``, or None if the tree is empty."""
        best: Rect | None = None
        best_dist = sys.float_info.max

        def visit(node: RTreeNode) -> None:
            nonlocal best, best_dist
            if node.is_empty() or node.bounds.distance(point) >= best_dist:
                return
            if node.is_leaf:
                for obj in node.objects:
                    dist = obj.distance(point)
                    if dist < best_dist:
                        best, best_dist = obj, dist
            else:
                for child in sorted(node.children, key=lambda c: c.bounds.distance(point)):
                    visit(child)

        visit(self._root)
        return best

    def _iter_region(self, node: RTreeNode, region: Rect) -> Iterator[Rect]:
        if not node.bounds.intersects(region):
            return
        if node.is_leaf:
            yield from (obj for obj in node.objects if region.intersects(obj))
        else:
            for child in node.children:
                yield from self._iter_region(child, region)

    def _contains(self, node: RTreeNode, obj: Rect) -> bool:
        if not node.bounds.intersects(obj):
            return False
        if node.is_leaf:
            return obj in node.objects
        return any(self._contains(child, obj) for child in node.children)

    def _find_parent(self, current: RTreeNode, child: RTreeNode) -> RTreeNode | None:
        if current.is_leaf:
            return None
        for candidate in current.children:
            if candidate is child:
                return current
            parent = self._find_parent(candidate, child)
            if parent is not None:
                return parent
        return None

    def _ancestors(self, node: RTreeNode) -> Iterator[RTreeNode]:
        parent = self._find_parent(self._root, node)
        while parent is not None:
            yield parent
            parent = self._find_parent(self._root, parent)

    def _choose_leaf(self, node: RTreeNode, obj: Rect) -> RTreeNode:
        while not node.is_leaf:
            node = min(
                node.children,
                key=lambda c: (c.bounds.expansion_area(obj), c.bounds.area()),
            )
        return node

    def _split(self, node: RTreeNode) -> None:
        sibling = RTreeNode(node.is_leaf)
        if node.is_leaf:
            node.objects.sort(key=lambda r: r.low.x)
            half = len(node.objects) // 2
            sibling.objects = node.objects[half:]
            del node.objects[half:]
        else:
            node.children.sort(key=lambda c: c.bounds.low.x)
            half = len(node.children) // 2
            sibling.children = node.children[half:]
            del node.children[half:]
        node.recalculate_bounds()
        sibling.recalculate_bounds()

        if node is self._root:
            new_root = RTreeNode()
            new_root.add_child(node)
            new_root.add_child(sibling)
            self._root = new_root
            return
        parent = self._find_parent(self._root, node)
        parent.add_child(sibling)
        if len(parent.children) > self.max_children:
            self._split(parent)

    def _remove_from(self, node: RTreeNode, obj: Rect) -> bool:
        if not node.bounds.intersects(obj):
            return False
        if node.is_leaf:
            return node.remove_object(obj)
        for child in node.children:
            if self._remove_from(child, obj):
                if len(child) < self.min_children:
                    self._handle_underflow(child)
                node.recalculate_bounds()
                return True
        return False

    def _handle_underflow(self, node: RTreeNode) -> None:
        parent = self._find_parent(self._root, node)
        if parent is None:
            # Either the root, or a node already merged away and detached.
            if node is self._root and not node.is_leaf and len(node.children) == 1:
                self._root = node.children[0]
            return

        for sibling in parent.children:
            if sibling is node:
                continue
            if node.is_leaf and len(sibling.objects) > self.min_children:
                node.add_object(sibling.objects.pop())
            elif not node.is_leaf and len(sibling.children) > self.min_children:
                node.add_child(sibling.children.pop())
            else:
                continue
            sibling.recalculate_bounds()
            node.recalculate_bounds()
            parent.recalculate_bounds()
            return

        if len(parent.children) < 2:
            return
        index = next(i for i, c in enumerate(parent.children) if c is node)
        sibling = parent.children[index + 1] if index == 0 else parent.children[index - 1]
        if node.is_leaf:
            sibling.objects.extend(node.objects)
        else:
            sibling.children.extend(node.children)
        del parent.children[index]
        sibling.recalculate_bounds()
        parent.recalculate_bounds()

        if parent is not self._root and len(parent.children) < self.min_children:
            self._handle_underflow(parent)
        elif parent is self._root and len(parent.children) == 1:
            self._root = parent.children[0]