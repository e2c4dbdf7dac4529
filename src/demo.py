# demo.py
from __future__ import annotations

from notation import describe
from plot_complex import plot_complex
from simplicial_complex import SimplicialComplex

plot_file = None  # e.g. "complex.png" to also save a figure of the first complex
show_plot = False


def main() -> None:
    # the empty complex
    asc = SimplicialComplex.empty()
    print(asc)

    # these reduce to the same facets: {1,5,7} and {3,5,7} lie inside {1,3,5,7}
    a2 = SimplicialComplex.create([{1, 2, 3}, {4, 5, 6}, {1, 3, 5, 7}, {1, 5, 7}])
    a3 = SimplicialComplex.create(
        [{4, 5, 6}, {1, 5, 7}, {1, 2, 3}, {1, 3, 5, 7}, {3, 5, 7}, {6, 5, 4}]
    )
    print(f"The ASCs are equal: {a2 == a3}\n")
    print(describe(a2))

    if plot_file or show_plot:
        plot_complex(a2, outfile=plot_file, title="Example complex", show=show_plot)


if __name__ == "__main__":
    main()
