from __future__ import annotations
import warnings
from dataclasses import dataclass, field
from typing import FrozenSet, Hashable, Iterable, Iterator, List, Tuple

Vertex = Hashable
Edge = FrozenSet[Vertex]

# edges() warns above this facet size: it enumerates 2^k - 1 subsets per facet
EDGE_ENUMERATION_WARN_SIZE = 20


def is_subset(sub: Edge, sup: Edge) -> bool:
    """
    True iff every vertex of sub is a member of sup.
    A candidate larger than the target is rejected before any lookup.
    """
    if len(sub) > len(sup):
        return False
    return all(v in sup for v in sub)


def non_empty_subsets(edge: Iterable[Vertex]) -> FrozenSet[Edge]:
    """
    Return every non-empty subset of edge (its power set minus the empty set).
    Built by doubling: each vertex extends a copy of every subset seen so far.
    """
    subsets: List[Tuple[Vertex, ...]] = [()]
    for v in edge:
        subsets += [s + (v,) for s in subsets]
    return frozenset(frozenset(s) for s in subsets if s)


@dataclass(frozen=True, repr=False)
class SimplicialComplex:
    """
    Immutable abstract simplicial complex, stored by its facets only.

    The facets form an antichain: no facet is a subset of another.
    Edges are folded in one at a time through add(), which returns a new
    complex and never mutates self. Vertices and the full edge set are
    derived on demand from the facets and are never cached.

    SimplicialComplex() is the empty complex. There is no public way to
    wrap an arbitrary facet set; use create() or add().
    """
    _facets: FrozenSet[Edge] = field(default=frozenset(), init=False)

    @classmethod
    def _from_facets(cls, facets: FrozenSet[Edge]) -> SimplicialComplex:
        # caller guarantees facets is an antichain with no empty edge
        asc = cls()
        object.__setattr__(asc, "_facets", facets)
        return asc

    # -------- construction --------

    @classmethod
    def empty(cls) -> SimplicialComplex:
        return cls()

    @classmethod
    def create(cls, edges: Iterable[Iterable[Vertex]] = ()) -> SimplicialComplex:
        """
        Fold edges into the empty complex, left to right.
        The resulting facets do not depend on the order of the edges.
        """
        return cls.empty().add_edges(edges)

    def add(self, edge: Iterable[Vertex]) -> SimplicialComplex:
        """
        Return the complex obtained by including edge.

        - edge already a facet, or a subset of one: self is returned.
        - otherwise edge becomes a facet and every facet it contains is dropped.
        The empty edge never changes the complex.
        """
        edge = frozenset(edge)
        if not edge:
            return self

        if edge in self._facets:
            return self
        if any(is_subset(edge, facet) for facet in self._facets):
            return self

        kept = [facet for facet in self._facets if not is_subset(facet, edge)]
        kept.append(edge)
        return self._from_facets(frozenset(kept))

    def add_edges(self, edges: Iterable[Iterable[Vertex]]) -> SimplicialComplex:
        """Add each edge in turn and return the final complex."""
        asc = self
        for edge in edges:
            asc = asc.add(edge)
        return asc

    def __add__(self, edge: Iterable[Vertex]) -> SimplicialComplex:
        if isinstance(edge, SimplicialComplex):
            return NotImplemented
        return self.add(edge)

    # -------- views --------

    def facets(self) -> FrozenSet[Edge]:
        """The maximal edges; they fully define the complex."""
        return self._facets

    def vertices(self) -> FrozenSet[Vertex]:
        """Union of the vertices of every facet."""
        return frozenset(v for facet in self._facets for v in facet)

    def edges(self) -> FrozenSet[Edge]:
        """
        Every non-empty subset of every facet.

        Not cached, and exponential in the size of the largest facet
        (2^k - 1 subsets for a facet of k vertices). Avoid calling it in a
        loop; use `edge in complex` to test a single edge instead.
        """
        largest = max((len(f) for f in self._facets), default=0)
        if largest > EDGE_ENUMERATION_WARN_SIZE:
            warnings.warn(
                f"edges() enumerates 2^{largest} - 1 subsets of a facet with "
                f"{largest} vertices",
                RuntimeWarning,
                stacklevel=2,
            )

        out: set = set()
        for facet in self._facets:
            out |= non_empty_subsets(facet)
        return frozenset(out)

    @property
    def dimension(self) -> int:
        """Largest facet size minus one; -1 for the empty complex."""
        return max((len(f) for f in self._facets), default=0) - 1

    # -------- collection API --------

    def __contains__(self, edge: object) -> bool:
        try:
            edge = frozenset(edge)  # type: ignore[arg-type]
        except TypeError:
            return False
        return bool(edge) and any(is_subset(edge, facet) for facet in self._facets)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._facets)

    def __len__(self) -> int:
        return len(self._facets)

    def __repr__(self) -> str:
        return (
            f"SimplicialComplex(facets={len(self._facets)}, "
            f"vertices={len(self.vertices())}, dim={self.dimension})"
        )
