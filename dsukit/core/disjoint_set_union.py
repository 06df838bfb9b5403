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


from loguru import logger

from dsukit.core.exceptions import element_out_of_range, invalid_size


class DisjointSetUnion:
    """
    Disjoint Set Union (Union-Find) over the dense integer universe [0, size).

    Uses path compression in find and union by rank in union, giving
    near-constant amortized cost for both. Every element starts in its own
    singleton set.

    The forest is stored as two flat lists: parent[i] is the parent of i
    (parent[i] == i iff i is a root) and rank[i] is an upper bound on the
    height of the tree rooted at i while i is a root.
    """

    def __init__(self, size: int) -> None:
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise invalid_size(size)

        self._parent = list(range(size))
        self._rank = [0] * size
        self._count = size

    @property
    def size(self) -> int:
        """Number of elements in the universe."""
        return len(self._parent)

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"DisjointSetUnion(size={self.size}, count={self._count})"

    def _check_element(self, x: int) -> None:
        if (
            not isinstance(x, int)
            or isinstance(x, bool)
            or not 0 <= x < len(self._parent)
        ):
            raise element_out_of_range(x, len(self._parent))

    def _find_root(self, x: int) -> int:
        parent = self._parent

        root = x
        while parent[root] != root:
            root = parent[root]

        # Path compression: repoint every node on the path directly at the root
        while x != root:
            next_x = parent[x]
            parent[x] = root
            x = next_x

        return root

    def find(self, x: int) -> int:
        """
        Find the representative (root) of the set containing x.

        Every node visited on the way to the root is repointed directly at
        it, which speeds up later queries without changing any answer.

        Args:
            x: Element in [0, size)

        Returns:
            The representative element of x's set

        Raises:
            ElementOutOfRangeError: If x is not in [0, size)
        """
        self._check_element(x)
        return self._find_root(x)

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        The root with the smaller rank is attached under the root with the
        larger rank. On a tie, x's root becomes the parent and its rank grows
        by one.

        Args:
            x: First element in [0, size)
            y: Second element in [0, size)

        Returns:
            True if two sets were merged, False if x and y were already
            in the same set

        Raises:
            ElementOutOfRangeError: If x or y is not in [0, size)
        """
        self._check_element(x)
        self._check_element(y)

        root_x = self._find_root(x)
        root_y = self._find_root(y)

        if root_x == root_y:
            return False  # Already in the same set

        # Union by rank
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1

        self._count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return True if x and y are currently in the same set."""
        self._check_element(x)
        self._check_element(y)
        return self._find_root(x) == self._find_root(y)

    def count(self) -> int:
        """Number of disjoint sets, maintained incrementally (O(1))."""
        return self._count

    def isolate(self, x: int) -> None:
        """
        Move x into a new singleton set.

        The other members of x's former set stay connected to each other and
        no element keeps a parent pointer to x afterwards. If x was already
        alone this only resets its rank.

        Time complexity is O(size): x's children have to be found by a scan
        since the forest keeps no child lists.

        Args:
            x: Element in [0, size)

        Raises:
            ElementOutOfRangeError: If x is not in [0, size)
        """
        self._check_element(x)
        parent = self._parent
        rank = self._rank

        if parent[x] != x:
            # x may still hold children from before it was attached under
            # another root; they move up to x's parent, which stays in the set
            new_parent = parent[x]
            moved = 0
            for i in range(len(parent)):
                if parent[i] == x:
                    parent[i] = new_parent
                    moved += 1

            parent[x] = x
            rank[x] = 0
            self._count += 1
            logger.debug(
                f"Isolated non-root element {x}; moved {moved} children to {new_parent}"
            )
            return

        # x is a root: flatten the whole forest so every member of x's set
        # points straight at x, then hand the set over to another member
        for i in range(len(parent)):
            self._find_root(i)

        members = [i for i in range(len(parent)) if i != x and parent[i] == x]
        rank[x] = 0

        if not members:
            return  # x was already a singleton

        new_root = members[0]
        for i in members:
            parent[i] = new_root
            rank[i] = 0
        if len(members) > 1:
            rank[new_root] = 1

        self._count += 1
        logger.debug(
            f"Isolated root element {x}; {len(members)} members now rooted at {new_root}"
        )
