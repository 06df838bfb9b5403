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


def groups(dsu: DisjointSetUnion) -> list[list[int]]:
    """
    Return the members of every set in dsu.

    Members are ascending and sets are ordered by their smallest member.
    """
    by_root: dict[int, list[int]] = {}
    for i in range(dsu.size):
        by_root.setdefault(dsu.find(i), []).append(i)
    return list(by_root.values())


def build(size: int, edges: Iterable[Edge | tuple]) -> DisjointSetUnion:
    """Create a DisjointSetUnion of the given size and union every edge into it."""
    dsu = DisjointSetUnion(size)
    for item in edges:
        edge = to_edge(item)
        if dsu.union(edge.u, edge.v):
            logger.debug(f"Merged {edge.u} and {edge.v}; {dsu.count()} sets left")
    return dsu


def connected_components(size: int, edges: Iterable[Edge | tuple]) -> list[list[int]]:
    return groups(build(size, edges))
