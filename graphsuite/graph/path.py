"""Ordered walk through a graph with its accumulated cost."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple

from graphsuite.types.base import VertexID

Step = Tuple[VertexID, VertexID, Any]


@dataclass
class Path:
    """A walk given as consecutive ``(source, target, edge)`` steps.

    Tours produced by the TSP solvers are closed paths: the last step returns
    to ``start``.

    Attributes:
        start: First vertex of the walk, or None for an empty path.
        steps: Consecutive steps; each step's source is the previous target.
        cost: Sum of the step weights.
    """

    start: Optional[VertexID] = None
    steps: List[Step] = field(default_factory=list)
    cost: Any = 0

    def push(self, source: VertexID, target: VertexID, edge: Any, weight: Any) -> None:
        """Append a step and add its weight to the cost.

        Raises:
            ValueError: If ``source`` does not continue the walk.
        """
        if self.start is None:
            self.start = source
        elif source != self.end:
            raise ValueError(
                f"Step from '{source}' does not continue a path ending at '{self.end}'."
            )
        self.steps.append((source, target, edge))
        self.cost = self.cost + weight

    @property
    def end(self) -> Optional[VertexID]:
        if self.steps:
            return self.steps[-1][1]
        return self.start

    @property
    def is_closed(self) -> bool:
        return bool(self.steps) and self.start == self.end

    def vertices(self) -> List[VertexID]:
        """Vertex sequence of the walk, including the start (and the return, if closed)."""
        if self.start is None:
            return []
        return [self.start] + [target for _, target, _ in self.steps]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __str__(self) -> str:
        lines = [
            f"{i}: {source} -> {target} via {edge!r}"
            for i, (source, target, edge) in enumerate(self.steps, start=1)
        ]
        lines.append(f"cost: {self.cost}")
        return "\n".join(lines)
