# mstkit/core/edge.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Vertex = int


@dataclass(frozen=True)
class Edge:
    """
    Weighted undirected edge between two vertex indices.

    Equality and hashing are structural over (src, dest, weight) in that
    field order, so two parallel edges with the same endpoints and weight
    compare equal.
    """
    src: Vertex
    dest: Vertex
    weight: int

    @property
    def endpoints(self) -> Tuple[Vertex, Vertex]:
        return (self.src, self.dest)

    def other(self, v: Vertex) -> Vertex:
        if v == self.src:
            return self.dest
        if v == self.dest:
            return self.src
        raise ValueError(f"Vertex {v!r} is not an endpoint of {self}")

    def is_self_loop(self) -> bool:
        return self.src == self.dest

    def __str__(self) -> str:
        return f"{self.src} - {self.dest} (weight: {self.weight})"
