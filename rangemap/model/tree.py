"""
Interval tree over integer mapping ranges.

Each node picks a center between the lowest and highest range start.
Ranges entirely below the center go to the left subtree, ranges entirely
above it go to the right subtree, and the ranges covering the center stay
on the node, kept twice: ascending by start and descending by end, so a
query can stop at the first entry that cannot match.

See: http://en.wikipedia.org/wiki/Interval_tree
"""

from typing import ClassVar, Iterable, Iterator, Optional

from .arithmetic import Relation, classify
from .range import MappingRange, source_key


class RangeNode:
    __slots__ = ("center", "left", "right", "by_start", "by_end")

    def __init__(
        self,
        center: int,
        left: Optional["RangeNode"],
        right: Optional["RangeNode"],
        overlapping: list[MappingRange],
    ) -> None:
        self.center = center
        self.left = left
        self.right = right
        self.by_start = sorted(overlapping, key=source_key)
        self.by_end = sorted(
            overlapping, key=lambda r: (-r.source_end, -r.source_start)
        )

    @classmethod
    def create(cls, ranges: list[MappingRange]) -> Optional["RangeNode"]:
        if not ranges:
            return None
        starts = [r.source_start for r in ranges]
        center = (min(starts) + max(starts)) >> 1
        left, right, overlapping = [], [], []
        for r in ranges:
            relation = classify(r, center)
            if relation is Relation.LEFT_OF:
                left.append(r)
            elif relation is Relation.RIGHT_OF:
                right.append(r)
            else:
                overlapping.append(r)
        return cls(center, cls.create(left), cls.create(right), overlapping)

    def map(self, x: int) -> Optional[int]:
        node: Optional[RangeNode] = self
        while node is not None:
            if x < node.center:
                for r in node.by_start:
                    if r.source_start > x:
                        break
                    return r.map_point(x)
                node = node.left
            elif x > node.center:
                for r in node.by_end:
                    if r.source_end <= x:
                        break
                    return r.map_point(x)
                node = node.right
            else:
                return node.by_start[0].map_point(x) if node.by_start else None
        return None

    def collect(self, start: int, end: int, result: list[MappingRange]) -> None:
        if end <= self.center:
            for r in self.by_start:
                if r.source_start >= end:
                    break
                result.append(r)
            if self.left is not None:
                self.left.collect(start, end, result)
        elif start > self.center:
            for r in self.by_end:
                if r.source_end <= start:
                    break
                result.append(r)
            if self.right is not None:
                self.right.collect(start, end, result)
        else:
            # the query covers the center, so does every range kept here
            result.extend(self.by_start)
            if self.left is not None:
                self.left.collect(start, end, result)
            if self.right is not None:
                self.right.collect(start, end, result)

    def __iter__(self) -> Iterator[MappingRange]:
        if self.left is not None:
            yield from self.left
        yield from self.by_start
        if self.right is not None:
            yield from self.right

    @property
    def depth(self) -> int:
        return 1 + max(
            self.left.depth if self.left is not None else 0,
            self.right.depth if self.right is not None else 0,
        )


class RangeTree:
    """
    A static interval tree answering which range holds a point, and which
    ranges meet a query range. Built once with :meth:`build`; there is no
    insertion or removal.

    >>> tree = RangeTree.build([MappingRange(52, 50, 48)])
    >>> tree.map(53)
    55
    >>> tree.map(10) is None
    True
    """

    empty: ClassVar["RangeTree"]

    def __init__(self, root: Optional[RangeNode]) -> None:
        self.root = root

    @classmethod
    def build(cls, ranges: Iterable[MappingRange]) -> "RangeTree":
        root = RangeNode.create(list(ranges))
        if root is None:
            return cls.empty
        return cls(root)

    def map(self, point: int) -> Optional[int]:
        """
        The image of ``point`` under the range holding it, or ``None`` when
        no range does. ``None`` is not an error, callers treat it as the
        identity.
        """
        if self.root is None:
            return None
        return self.root.map(point)

    def overlapping(self, query: MappingRange) -> list[MappingRange]:
        """Every stored range sharing at least one source identifier with ``query``."""
        if self.root is None:
            return []
        result: list[MappingRange] = []
        self.root.collect(query.source_start, query.source_end, result)
        result.sort(key=source_key)
        return result

    @property
    def depth(self) -> int:
        return self.root.depth if self.root is not None else 0

    def __iter__(self) -> Iterator[MappingRange]:
        if self.root is not None:
            yield from self.root

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:
        return f"<RangeTree {len(self)} ranges, depth {self.depth}>"


RangeTree.empty = RangeTree(None)
