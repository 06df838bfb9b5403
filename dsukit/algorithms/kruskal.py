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


from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from dsukit.core.data.edge import Edge, to_edge
from dsukit.core.disjoint_set_union import DisjointSetUnion


@dataclass(frozen=True)
class SpanningForest:
    """
    Result of Kruskal's algorithm.

    edges holds the accepted edges in the order they were accepted
    (ascending weight); components is the number of trees in the forest.
    """

    edges: tuple[Edge, ...]
    total_weight: float
    components: int

    @property
    def is_spanning_tree(self) -> bool:
        return self.components == 1


def minimum_spanning_forest(
    size: int, edges: Iterable[Edge | tuple]
) -> SpanningForest:
    """
    Kruskal's algorithm.

    Edges are taken in ascending weight order (ties keep input order) and
    kept whenever they join two different trees. A disconnected graph
    yields a minimum spanning forest with one tree per component.
    """
    candidates = sorted((to_edge(item) for item in edges), key=lambda e: e.weight)

    dsu = DisjointSetUnion(size)
    accepted: list[Edge] = []
    total_weight = 0

    for edge in candidates:
        if dsu.union(edge.u, edge.v):
            accepted.append(edge)
            total_weight += edge.weight
            # a forest over n vertices has at most n - 1 edges
            if len(accepted) == size - 1:
                break

    logger.debug(
        f"Spanning forest: edges={len(accepted)} weight={total_weight} components={dsu.count()}"
    )
    return SpanningForest(tuple(accepted), total_weight, dsu.count())
