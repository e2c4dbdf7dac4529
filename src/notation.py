from __future__ import annotations
from typing import Iterable, List

from simplicial_complex import Edge, SimplicialComplex, Vertex


def format_edge(edge: Iterable[Vertex]) -> str:
    """Brace-delimited ascending vertices, e.g. {1,2,3}."""
    return "{" + ",".join(str(v) for v in sorted(edge)) + "}"


def sorted_edges(edges: Iterable[Edge]) -> List[Edge]:
    """Sort by size, then by the ascending vertex tuple."""
    return sorted(edges, key=lambda e: (len(e), tuple(sorted(e))))


def format_edges(edges: Iterable[Edge]) -> str:
    return "\n".join(format_edge(e) for e in sorted_edges(edges))


def format_vertices(vertices: Iterable[Vertex]) -> str:
    return " ".join(str(v) for v in sorted(vertices))


def describe(asc: SimplicialComplex) -> str:
    """
    Text report of a complex: its facets, vertices and full edge set.
    Calls edges(), so the cost grows exponentially with the largest facet.
    """
    sections = [
        ("FACETS", format_edges(asc.facets())),
        ("VERTICES", format_vertices(asc.vertices())),
        ("EDGES", format_edges(asc.edges())),
    ]
    return "\n\n".join(f"* {name} *\n{body}" for name, body in sections) + "\n"


def write_report(asc: SimplicialComplex, outfile: str) -> None:
    """Write describe(asc) to outfile."""
    with open(outfile, "w", encoding="utf-8") as f:
        f.write(describe(asc))
