"""
Text rendering and report tests.

Run: python -m pytest tests/test_notation.py -v
"""

from notation import (
    describe,
    format_edge,
    format_edges,
    format_vertices,
    sorted_edges,
    write_report,
)
from simplicial_complex import SimplicialComplex


def test_format_edge():
    assert format_edge({3, 1, 2}) == "{1,2,3}"
    assert format_edge({5}) == "{5}"
    assert format_edge(set()) == "{}"


def test_sorted_edges_by_size_then_vertices():
    edges = [frozenset(e) for e in ({2, 3}, {1}, {1, 2, 3}, {1, 3}, {2})]
    assert [tuple(sorted(e)) for e in sorted_edges(edges)] == [
        (1,), (2,), (1, 3), (2, 3), (1, 2, 3),
    ]


def test_format_edges_and_vertices():
    asc = SimplicialComplex.create([{1, 2}, {4, 3}])
    assert format_edges(asc.facets()) == "{1,2}\n{3,4}"
    assert format_vertices(asc.vertices()) == "1 2 3 4"


def test_describe_sections():
    asc = SimplicialComplex.create([{1, 2}, {3}])
    assert describe(asc) == (
        "* FACETS *\n{3}\n{1,2}\n\n"
        "* VERTICES *\n1 2 3\n\n"
        "* EDGES *\n{1}\n{2}\n{3}\n{1,2}\n"
    )


def test_describe_empty_complex():
    text = describe(SimplicialComplex.empty())
    assert text == "* FACETS *\n\n\n* VERTICES *\n\n\n* EDGES *\n\n"


def test_write_report(tmp_path):
    asc = SimplicialComplex.create([{1, 2, 3}])
    out = tmp_path / "report.txt"
    write_report(asc, str(out))
    assert out.read_text(encoding="utf-8") == describe(asc)
