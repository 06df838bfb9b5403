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


from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """
    An undirected, weighted edge between two elements of the universe.
    """

    u: int
    v: int
    weight: float = 1

    def as_tuple(self) -> tuple[int, int, float]:
        return (self.u, self.v, self.weight)


@dataclass(frozen=True)
class EdgeList:
    """
    A parsed graph: the universe size plus its edges in input order.
    """

    size: int
    edges: tuple[Edge, ...]


def to_edge(item: "Edge | tuple") -> Edge:
    """Accept an Edge or a (u, v) / (u, v, weight) tuple."""
    if isinstance(item, Edge):
        return item
    return Edge(*item)
