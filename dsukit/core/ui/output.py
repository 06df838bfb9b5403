# -----------------------------------------------------------------------------
# dsukit - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of dsukit.
#
# dsukit is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------


import json

import typer
from rich.console import Console
from rich.table import Table

from dsukit.algorithms.kruskal import SpanningForest
from dsukit.core.data.edge import Edge


def _label(index: int, index_base: int) -> int:
    # Results are reported in the same labelling as the input
    return index + index_base


def _edge_payload(edge: Edge, index_base: int) -> dict:
    return {
        "u": _label(edge.u, index_base),
        "v": _label(edge.v, index_base),
        "weight": edge.weight,
    }


def print_json(payload) -> None:
    typer.echo(json.dumps(payload))


def print_groups(
    groups: list[list[int]], output_format: str, index_base: int = 0
) -> None:
    labelled = [[_label(i, index_base) for i in group] for group in groups]

    if output_format == "json":
        print_json({"count": len(labelled), "sets": labelled})
        return

    table = Table(title=f"{len(labelled)} disjoint sets")
    table.add_column("Set", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Members")
    for n, group in enumerate(labelled, start=1):
        table.add_row(str(n), str(len(group)), " ".join(map(str, group)))
    Console().print(table)


def print_forest(
    forest: SpanningForest, output_format: str, index_base: int = 0
) -> None:
    if output_format == "json":
        print_json(
            {
                "edges": [_edge_payload(e, index_base) for e in forest.edges],
                "total_weight": forest.total_weight,
                "components": forest.components,
                "spanning_tree": forest.is_spanning_tree,
            }
        )
        return

    kind = "tree" if forest.is_spanning_tree else "forest"
    table = Table(title=f"Minimum spanning {kind}")
    table.add_column("U", justify="right")
    table.add_column("V", justify="right")
    table.add_column("Weight", justify="right")
    for edge in forest.edges:
        table.add_row(
            str(_label(edge.u, index_base)),
            str(_label(edge.v, index_base)),
            str(edge.weight),
        )

    console = Console()
    console.print(table)
    console.print(f"Total weight: {forest.total_weight}")
    console.print(f"Components: {forest.components}")


def print_cycle(edge: Edge | None, output_format: str, index_base: int = 0) -> None:
    if output_format == "json":
        print_json(
            {
                "has_cycle": edge is not None,
                "edge": _edge_payload(edge, index_base) if edge is not None else None,
            }
        )
        return

    if edge is None:
        Console().print("No cycle: the graph is a forest")
    else:
        Console().print(
            f"Cycle closed by edge {_label(edge.u, index_base)} - {_label(edge.v, index_base)}"
        )
