# plot_complex.py
from __future__ import annotations
import math
from typing import Dict, Iterable, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from simplicial_complex import SimplicialComplex, Vertex

Point = Tuple[float, float]


def vertex_positions(vertices: Iterable[Vertex]) -> Dict[Vertex, Point]:
    """Place vertices on the unit circle, ascending and counter-clockwise from (1, 0)."""
    ordered = sorted(vertices)
    n = len(ordered)
    return {
        v: (math.cos(2 * math.pi * i / n), math.sin(2 * math.pi * i / n))
        for i, v in enumerate(ordered)
    }


def plot_complex(
    asc: SimplicialComplex,
    *,
    outfile: Optional[str] = None,
    title: Optional[str] = None,
    show: bool = True,
    ax: Optional[Axes] = None,
) -> Figure:
    """
    Draw the facets of a complex with its vertices on a circle.
    - 1 vertex: a point; 2 vertices: a segment;
    - 3+ vertices: a translucent polygon plus all of its segments.
    Only facets are drawn; their faces are implied.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5), dpi=160)
    else:
        fig = ax.figure

    if not asc.facets():
        ax.set_axis_off()
        ax.text(0.5, 0.5, "Empty complex", ha="center", va="center", transform=ax.transAxes)
        if outfile:
            fig.savefig(outfile, bbox_inches="tight", dpi=160)
        if show:
            plt.show()
        return fig

    pos = vertex_positions(asc.vertices())

    # big facets first so smaller ones stay visible on top
    facets = sorted(asc.facets(), key=lambda f: (-len(f), tuple(sorted(f))))
    lw = 1.5
    for facet in facets:
        verts = sorted(facet)
        pts = [pos[v] for v in verts]
        if len(verts) == 1:
            ax.plot(*pts[0], marker="o", markersize=6, color="darkred", zorder=3)
            continue
        if len(verts) >= 3:
            # circle order keeps the polygon simple
            ax.add_patch(Polygon(pts, closed=True, alpha=0.2, color="darkblue", zorder=1))
        for i in range(len(pts)):
            for j in range(i + 1, len(pts)):
                ax.plot(
                    [pts[i][0], pts[j][0]],
                    [pts[i][1], pts[j][1]],
                    linewidth=lw,
                    color="darkblue",
                    zorder=2,
                )

    for v, (x, y) in pos.items():
        ax.plot(x, y, marker="o", markersize=4, color="black", zorder=4)
        ax.annotate(str(v), xy=(x, y), xytext=(1.12 * x, 1.12 * y), ha="center", va="center")

    ax.set_xlim(-1.3, 1.3)
    ax.set_ylim(-1.3, 1.3)
    ax.set_aspect("equal")
    ax.set_axis_off()
    if title:
        title += f" [dim {asc.dimension}]"
        ax.set_title(title)

    fig.tight_layout()
    if outfile:
        fig.savefig(outfile, bbox_inches="tight", dpi=180)
    if show:
        plt.show()
    return fig
