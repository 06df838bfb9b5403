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


from collections.abc import Hashable, Iterable

from dsukit.core.disjoint_set_union import DisjointSetUnion
from dsukit.core.exceptions import ValidationError, unknown_key


class KeyedDisjointSet:
    """Disjoint sets over arbitrary hashable keys, backed by a DisjointSetUnion."""

    def __init__(self, keys: Iterable[Hashable]) -> None:
        self._keys: list[Hashable] = []
        self._index: dict[Hashable, int] = {}

        for key in keys:
            if key in self._index:
                raise ValidationError(
                    f"Duplicate key: {key!r}",
                    "Each key may only be registered once",
                )
            self._index[key] = len(self._keys)
            self._keys.append(key)

        self._dsu = DisjointSetUnion(len(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"KeyedDisjointSet(size={len(self)}, count={self.count()})"

    def index_of(self, key: Hashable) -> int:
        try:
            return self._index[key]
        except KeyError:
            raise unknown_key(key) from None

    def key_of(self, index: int) -> Hashable:
        # Validates the index through the underlying structure
        self._dsu.find(index)
        return self._keys[index]

    def find(self, key: Hashable) -> Hashable:
        return self._keys[self._dsu.find(self.index_of(key))]

    def union(self, a: Hashable, b: Hashable) -> bool:
        return self._dsu.union(self.index_of(a), self.index_of(b))

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self._dsu.connected(self.index_of(a), self.index_of(b))

    def count(self) -> int:
        return self._dsu.count()

    def isolate(self, key: Hashable) -> None:
        self._dsu.isolate(self.index_of(key))

    def groups(self) -> list[list[Hashable]]:
        """Return the keys of every set, in registration order of their first key."""
        by_root: dict[int, list[Hashable]] = {}
        for i, key in enumerate(self._keys):
            by_root.setdefault(self._dsu.find(i), []).append(key)
        return list(by_root.values())
