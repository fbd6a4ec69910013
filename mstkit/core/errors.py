# mstkit/core/errors.py
from __future__ import annotations

from typing import Optional


class InvalidVertexError(ValueError):
    """
    Raised when a vertex index falls outside [0, vertex_count).
    """

    def __init__(self, vertex: int, vertex_count: Optional[int] = None):
        self.vertex = vertex
        self.vertex_count = vertex_count
        if vertex_count is None:
            msg = f"Invalid vertex {vertex!r}: vertex indices must be >= 0"
        else:
            msg = f"Invalid vertex {vertex!r}: expected an index in [0, {vertex_count})"
        super().__init__(msg)


def check_vertex(v: int, vertex_count: Optional[int] = None) -> int:
    if v < 0 or (vertex_count is not None and v >= vertex_count):
        raise InvalidVertexError(v, vertex_count)
    return v
