"""Command-line reports over a graph read from an adjacency-list file."""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable

from grafkit.graph import Edge, Graph, GraphFormatError

USAGE = (
    "Skladnia: \n grafkit [1-5] nazwa_pliku \n"
    " na przyklad grafkit 1 ../graf.txt"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def format_edges(edges: Iterable[Edge]) -> str:
    """Join edges with commas, repeating each once per parallel edge."""
    return ", ".join(str(edge) for edge in edges)


def describe(graph: Graph) -> str:
    """Vertex and edge sets with the adjacency and incidence matrices."""
    header = "\n".join(
        [
            f"Liczba wierzcholkow grafu G wynosi {graph.rank()}",
            f"Zbior wierzcholkow V = {{{', '.join(graph.vertices)}}} ",
            f"Liczba krawedzi grafu G wynosi {graph.size()}",
            f"Zbior krawedzi K = {{{format_edges(graph.edges())}}}",
        ]
    )
    return (
        f"{header}\n"
        f"Maciez sasiedztwa:\n{graph.matrix}\n"
        f"Maciez incydencji:\n{graph.incidence_matrix()}\n"
    )


def degrees_report(graph: Graph) -> str:
    """Order, size and the degree of every vertex."""
    lines = [
        f"Rzad grafu G wynosi {graph.rank()}",
        f"Rozmiar grafu G wynosi {graph.size()}",
        "Stopnie wierzcholkow:",
    ]
    lines.extend(f"deg({vertex}) = {graph.degree(vertex)}" for vertex in graph.vertices)
    return "\n".join(lines) + "\n"


def simplicity_report(graph: Graph) -> str:
    """Whether the graph is simple or a general multigraph."""
    kind = "prostym" if graph.is_simple() else "ogolnym"
    return f"Graf G jest grafem {kind}\n"


def completeness_report(graph: Graph) -> str:
    """Whether the graph is complete, listing the complement's edges if not."""
    if graph.is_full():
        return "Graf G jest grafem pelnym\n"
    return (
        "Graf G nie jest grafem pelnym\n"
        f"Krawedzie dopelnienia grafu G: {format_edges(graph.complement_edges())}\n"
    )


def neighbors_report(graph: Graph) -> str:
    """Each vertex followed by the vertices adjacent to it."""
    return "".join(
        f"{vertex} -> {', '.join(graph.neighbors(vertex))}\n" for vertex in graph.vertices
    )


_TASKS: dict[int, Callable[[Graph], str]] = {
    1: describe,
    2: degrees_report,
    3: simplicity_report,
    4: completeness_report,
    5: neighbors_report,
}


def run_task(task: int, path) -> str:
    """Read the graph at ``path`` and return the report for task ``task`` (1-5)."""
    report = _TASKS.get(task)
    if report is None:
        raise ValueError(f"unknown task {task}; expected 1-{len(_TASKS)}")
    return report(Graph.from_file(path))


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv=None) -> int:
    """Entry point: ``grafkit TASK FILE``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(f"niepoprawna liczba argumentow: {len(args) + 1}")
        print(USAGE)
        return 0

    task = _leading_int(args[0])
    print(task)
    if task not in _TASKS:
        print("Niepoprawny pierwszy argument.")
        print(USAGE)
        return 0

    try:
        report = run_task(task, args[1])
    except GraphFormatError as error:
        print(error, file=sys.stderr)
        return 1
    except OSError:
        print("Niepoprawna nazwa pliku", file=sys.stderr)
        return 1
    print(report, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())