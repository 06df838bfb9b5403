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


from dsukit.core.disjoint_set_union import DisjointSetUnion
from dsukit.core.exceptions import DsuError, ElementOutOfRangeError
from dsukit.core.keyed import KeyedDisjointSet

__all__ = [
    "DisjointSetUnion",
    "DsuError",
    "ElementOutOfRangeError",
    "KeyedDisjointSet",
]
