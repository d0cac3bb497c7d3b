"""Drawing primitives emitted by the renderers.

A :class:`Drawing` is an ordered list of primitives in plot coordinates
(the grid spans ``[0, n] x [0, n]`` with matrix row 0 at the top). It knows
nothing about matplotlib; :mod:`confmat.plotting.backend` paints it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple, Union

Color = Tuple[float, ...]


@dataclass(frozen=True)
class FillRect:
    x0: float
    y0: float
    x1: float
    y1: float
    color: Color


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    rotation: float = 0.0
    scale: float = 1.0
    anchor: str = "center"


@dataclass(frozen=True)
class Segment:
    x0: float
    y0: float
    x1: float
    y1: float
    width: float = 1.0
    color: Color = (0.0, 0.0, 0.0)


Primitive = Union[FillRect, Text, Segment]


@dataclass
class Drawing:
    """Append-only, ordered sequence of primitives."""

    primitives: List[Primitive] = field(default_factory=list)

    def add(self, primitive: Primitive) -> None:
        self.primitives.append(primitive)

    def extend(self, primitives: Iterable[Primitive]) -> None:
        self.primitives.extend(primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    def __len__(self) -> int:
        return len(self.primitives)

    @property
    def rects(self) -> List[FillRect]:
        return [p for p in self.primitives if isinstance(p, FillRect)]

    @property
    def texts(self) -> List[Text]:
        return [p for p in self.primitives if isinstance(p, Text)]

    @property
    def segments(self) -> List[Segment]:
        return [p for p in self.primitives if isinstance(p, Segment)]


__all__ = ["Color", "FillRect", "Text", "Segment", "Primitive", "Drawing"]
