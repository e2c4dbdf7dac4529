from __future__ import annotations
from pathlib import Path
from typing import FrozenSet, List

from simplicial_complex import SimplicialComplex


def parse_edge(line: str) -> FrozenSet[int]:
    """
    Parse one edge: whitespace-separated integer vertex ids.
    Raises ValueError on a non-integer token or a repeated vertex.
    """
    parts = line.split()
    try:
        verts = [int(v) for v in parts]
    except ValueError as e:
        raise ValueError(f"vertices must be integers, got {line.strip()!r}") from e

    edge = frozenset(verts)
    if len(edge) != len(verts):
        raise ValueError(f"repeated vertex in edge {sorted(verts)}")
    return edge


def read_edges(path: str | Path, *, allow_comments: bool = True) -> List[FrozenSet[int]]:
    """
    Read an edge list, one edge per line:
        v0 v1 ... vk
    Empty lines are skipped. If allow_comments is True, lines starting
    with '#' are skipped. Edges are returned in file order.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    edges: List[FrozenSet[int]] = []
    with p.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line:
                continue
            if allow_comments and line.startswith("#"):
                continue
            try:
                edges.append(parse_edge(line))
            except ValueError as e:
                raise ValueError(f"{p}:{lineno}: {e}") from e

    return edges


def load_complex(path: str | Path, *, allow_comments: bool = True) -> SimplicialComplex:
    """Build a complex by folding every edge of an edge-list file."""
    return SimplicialComplex.create(read_edges(path, allow_comments=allow_comments))
