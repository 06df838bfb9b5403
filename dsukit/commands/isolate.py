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
from dsukit.core.exceptions import element_out_of_range, handle_dsu_exception
from dsukit.core.logging.utils import time_block
from dsukit.core.ui.output import print_groups


@handle_dsu_exception
def main(
    ctx: typer.Context,
    path: str = typer.Argument(
        ...,
        help="Edge-list file ('u v [weight]' per line), or '-' for stdin.",
    ),
    elements: list[int] = typer.Argument(
        ...,
        help="Elements to split off into singleton sets, in order.",
    ),
) -> None:
    """Connect every edge, then split the given elements off into singleton sets.

    The other members of each element's set stay connected.

    Examples:
        dsu isolate edges.txt 3 7
    """
    global_context = ctx.obj
    base = global_context.index_base
    edge_list = read_edges(path, base)

    # Checked here so errors name the labels as they were typed
    for element in elements:
        if not base <= element < base + edge_list.size:
            raise element_out_of_range(element, edge_list.size, base)

    with time_block("Isolate"):
        dsu = build(edge_list.size, edge_list.edges)
        for element in elements:
            before = dsu.count()
            dsu.isolate(element - base)
            if dsu.count() == before:
                logger.info(f"{element} was already in a singleton set")

    print_groups(groups(dsu), global_context.output_format, base)
