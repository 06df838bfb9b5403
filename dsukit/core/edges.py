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


"""
Edge-list input.

Each non-blank line holds one undirected edge ``u v [weight]``; tokens may
be separated by whitespace or commas and ``#`` starts a comment. An
optional ``size N`` line fixes the universe size, otherwise it is one more
than the largest label seen.
"""

import math
import sys
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from dsukit.core.data.edge import Edge, EdgeList
from dsukit.core.exceptions import (
    InputFormatError,
    ValidationError,
    malformed_edge_line,
    path_not_found,
)

SIZE_DIRECTIVE = "size"


def _parse_label(token: str, index_base: int, line_number: int, line: str) -> int:
    try:
        label = int(token)
    except ValueError:
        raise malformed_edge_line(
            line_number, line, f"{token!r} is not an integer label"
        ) from None

    label -= index_base
    if label < 0:
        raise malformed_edge_line(
            line_number, line, f"label {token} is below the index base {index_base}"
        )
    return label


def _parse_weight(token: str, line_number: int, line: str) -> float:
    try:
        return int(token)
    except ValueError:
        pass

    try:
        value = float(token)
    except ValueError:
        raise malformed_edge_line(
            line_number, line, f"{token!r} is not a numeric weight"
        ) from None

    # nan and inf would break the weight ordering used by Kruskal
    if not math.isfinite(value):
        raise malformed_edge_line(
            line_number, line, "weight must be a finite number"
        )
    return value


def parse_edges(lines: Iterable[str], index_base: int = 0) -> EdgeList:
    """
    Parse edge-list lines into an EdgeList.

    Args:
        lines: Raw input lines (newline characters are allowed)
        index_base: Label of the first element in the input, 0 or 1

    Returns:
        The universe size and the parsed edges, in input order

    Raises:
        InputFormatError: On any malformed line
    """
    if index_base not in (0, 1):
        raise ValidationError(
            f"Invalid index base: {index_base!r}",
            "Edge labels must start at 0 or 1",
        )

    edges: list[Edge] = []
    declared_size: int | None = None
    max_label = -1

    for line_number, raw_line in enumerate(lines, start=1):
        content = raw_line.split("#", 1)[0].strip()
        if not content:
            continue

        tokens = content.replace(",", " ").split()

        if tokens[0].lower() == SIZE_DIRECTIVE:
            if len(tokens) != 2:
                raise malformed_edge_line(
                    line_number, raw_line, "expected 'size N'"
                )
            if declared_size is not None:
                raise malformed_edge_line(
                    line_number, raw_line, "the size is declared more than once"
                )
            # The size is a count, not a label, so it is never shifted
            declared_size = _parse_label(tokens[1], 0, line_number, raw_line)
            continue

        if len(tokens) not in (2, 3):
            raise malformed_edge_line(
                line_number, raw_line, "expected 'u v' or 'u v weight'"
            )

        u = _parse_label(tokens[0], index_base, line_number, raw_line)
        v = _parse_label(tokens[1], index_base, line_number, raw_line)
        weight = (
            _parse_weight(tokens[2], line_number, raw_line) if len(tokens) == 3 else 1
        )

        edges.append(Edge(u, v, weight))
        max_label = max(max_label, u, v)

    if declared_size is None:
        size = max_label + 1
    else:
        if max_label >= declared_size:
            raise InputFormatError(
                f"Edge label {max_label + index_base} does not fit the declared size {declared_size}",
                "Labels must lie in [index_base, index_base + size)",
            )
        size = declared_size

    logger.debug(f"Parsed edge list: size={size} edges={len(edges)}")
    return EdgeList(size, tuple(edges))


def read_edges(path: str | Path, index_base: int = 0) -> EdgeList:
    """Read an edge list from a file, or from stdin when path is '-'."""
    if str(path) == "-":
        return parse_edges(sys.stdin, index_base)

    path = Path(path)
    if not path.is_file():
        raise path_not_found(str(path))

    with open(path, encoding="utf-8") as f:
        return parse_edges(f, index_base)
