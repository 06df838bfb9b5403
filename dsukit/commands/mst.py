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


import typer

from dsukit.algorithms.kruskal import minimum_spanning_forest
from dsukit.core.edges import read_edges
from dsukit.core.exceptions import handle_dsu_exception
from dsukit.core.logging.utils import time_block
from dsukit.core.ui.output import print_forest


@handle_dsu_exception
def main(
    ctx: typer.Context,
    path: str = typer.Argument(
        ...,
        help="Weighted edge-list file ('u v weight' per line), or '-' for stdin.",
    ),
) -> None:
    """Compute a minimum spanning tree (or forest) with Kruskal's algorithm.

    Edges without a weight count as weight 1.
    """
    global_context = ctx.obj
    edge_list = read_edges(path, global_context.index_base)

    with time_block("Kruskal"):
        forest = minimum_spanning_forest(edge_list.size, edge_list.edges)

    print_forest(forest, global_context.output_format, global_context.index_base)
