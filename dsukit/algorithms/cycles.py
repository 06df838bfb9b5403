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

from loguru import logger

from dsukit.core.data.edge import Edge, to_edge
from dsukit.core.disjoint_set_union import DisjointSetUnion


def find_cycle_edge(size: int, edges: Iterable[Edge | tuple]) -> Edge | None:
    """
    Return the first edge that closes a cycle in an undirected graph.

    An edge closes a cycle when its endpoints are already connected by the
    edges before it. Self-loops count as cycles.

    Returns:
        The offending edge, or None if the graph is a forest
    """
    dsu = DisjointSetUnion(size)
    for item in edges:
        edge = to_edge(item)
        if not dsu.union(edge.u, edge.v):
            logger.debug(f"Edge ({edge.u}, {edge.v}) closes a cycle")
            return edge
    return None


def has_cycle(size: int, edges: Iterable[Edge | tuple]) -> bool:
    return find_cycle_edge(size, edges) is not None
