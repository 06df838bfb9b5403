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
from loguru import logger

from dsukit.algorithms.components import build, groups
from dsukit.core.edges import read_edges
from dsukit.core.exceptions import handle_dsu_exception
from dsukit.core.logging.utils import time_block
from dsukit.core.ui.output import print_groups


@handle_dsu_exception
def main(
    ctx: typer.Context,
    path: str = typer.Argument(
        ...,
        help="Edge-list file ('u v [weight]' per line), or '-' for stdin.",
    ),
) -> None:
    """Group the elements of a graph into connected components.

    Examples:
        # Components of a graph stored in edges.txt
        dsu components edges.txt

        # Read 1-based labels from stdin and print JSON
        cat edges.txt | dsu --index-base 1 --format json components -
    """
    global_context = ctx.obj
    edge_list = read_edges(path, global_context.index_base)

    with time_block("Components") as timing:
        dsu = build(edge_list.size, edge_list.edges)
        sets = groups(dsu)

    logger.debug(
        f"Found {dsu.count()} sets over {edge_list.size} elements in {timing.elapsed_ms}ms"
    )
    print_groups(sets, global_context.output_format, global_context.index_base)
