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


import contextlib
from dataclasses import dataclass
from time import perf_counter

from loguru import logger


@dataclass
class Timing:
    name: str
    elapsed_ms: int | None = None


@contextlib.contextmanager
def time_block(block_name: str, level: str = "DEBUG"):
    """
    Time a block of code and log how long it took.

    Yields a Timing whose elapsed_ms is filled in once the block exits,
    whether it finished normally or raised.
    """
    timing = Timing(block_name)
    logger.log(level, f"Starting {block_name}")
    start = perf_counter()

    try:
        yield timing
    finally:
        timing.elapsed_ms = int((perf_counter() - start) * 1000)
        logger.log(level, f"Finished {block_name}. Timing(ms)={timing.elapsed_ms}")
