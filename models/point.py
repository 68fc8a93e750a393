from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Tuple, Union

import numpy as np


Number = Union[int, float]


class Point(NamedTuple):
    """
    One generated sample. Basic mode yields floats, DDA mode yields ints.
    Compares equal to a plain (x, y) tuple.
    """

    x: Number
    y: Number


@dataclass(frozen=True)
class PointSequence:
    """
    Ordered, immutable result of one calculation.

    Generation order is significant: index k is the k-th emitted point.
    The display layer reads it through labels() / data(), the same split
    a line chart uses (x values as labels, y values as the data set).
    """

    points: Tuple[Point, ...] = ()

    @classmethod
    def empty(cls) -> "PointSequence":
        return cls(())

    @classmethod
    def from_iterable(cls, items: Iterable) -> "PointSequence":
        return cls(tuple(Point(*p) for p in items))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def labels(self) -> List[Number]:
        return [p.x for p in self.points]

    def data(self) -> List[Number]:
        return [p.y for p in self.points]

    def as_array(self) -> np.ndarray:
        """(n, 2) float array; shape (0, 2) when empty."""
        if not self.points:
            return np.empty((0, 2), dtype=float)
        return np.asarray(self.points, dtype=float)
