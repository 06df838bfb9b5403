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


import random

import pytest
from dsukit.core.disjoint_set_union import DisjointSetUnion
from dsukit.core.exceptions import (
    DsuError,
    ElementOutOfRangeError,
    ValidationError,
)

# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def chain(size: int) -> DisjointSetUnion:
    dsu = DisjointSetUnion(size)
    for i in range(size - 1):
        dsu.union(i, i + 1)
    return dsu


def snapshot(dsu: DisjointSetUnion):
    return list(dsu._parent), list(dsu._rank), dsu.count()


def depth(dsu: DisjointSetUnion, x: int) -> int:
    # Walks parent pointers without compressing
    steps = 0
    while dsu._parent[x] != x:
        x = dsu._parent[x]
        steps += 1
    return steps


def raw_root(dsu: DisjointSetUnion, x: int) -> int:
    while dsu._parent[x] != x:
        x = dsu._parent[x]
    return x


# -----------------------------------------------------------------------------
# Construction
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("size", [0, 1, 2, 10, 257])
def test_initial_state_is_all_singletons(size):
    dsu = DisjointSetUnion(size)

    assert dsu.count() == size
    assert dsu.size == size
    assert len(dsu) == size
    for i in range(size):
        assert dsu.find(i) == i


def test_empty_structure():
    dsu = DisjointSetUnion(0)

    assert dsu.count() == 0
    with pytest.raises(ElementOutOfRangeError):
        dsu.find(0)


@pytest.mark.parametrize("size", [-1, 2.5, "3", None, True])
def test_invalid_size_rejected(size):
    with pytest.raises(ValidationError):
        DisjointSetUnion(size)


def test_repr():
    dsu = DisjointSetUnion(4)
    dsu.union(0, 1)

    assert repr(dsu) == "DisjointSetUnion(size=4, count=3)"


# -----------------------------------------------------------------------------
# union / connected / count
# -----------------------------------------------------------------------------


def test_union_merges_disjoint_sets():
    dsu = DisjointSetUnion(5)

    assert dsu.union(0, 1) is True
    assert dsu.count() == 4
    assert dsu.union(2, 3) is True
    assert dsu.count() == 3

    assert dsu.connected(0, 1)
    assert dsu.connected(2, 3)
    assert not dsu.connected(0, 2)
    assert not dsu.connected(1, 4)


def test_union_twice_returns_true_then_false():
    dsu = DisjointSetUnion(3)

    assert dsu.union(0, 1) is True
    assert dsu.union(0, 1) is False
    assert dsu.union(1, 0) is False
    assert dsu.count() == 2


def test_union_is_symmetric_in_return_value():
    a = DisjointSetUnion(4)
    b = DisjointSetUnion(4)
    pairs = [(0, 1), (2, 3), (1, 2), (3, 0)]

    for x, y in pairs:
        assert a.union(x, y) == b.union(y, x)
    assert a.count() == b.count() == 1


def test_union_of_element_with_itself_is_noop():
    dsu = DisjointSetUnion(2)

    assert dsu.union(1, 1) is False
    assert dsu.count() == 2


def test_element_is_connected_to_itself():
    dsu = DisjointSetUnion(3)

    for i in range(3):
        assert dsu.connected(i, i)


def test_union_detects_cycle():
    dsu = DisjointSetUnion(4)

    assert dsu.union(0, 1)
    assert dsu.union(1, 2)
    assert dsu.union(2, 3)
    # 0 and 3 are already joined through 1 and 2
    assert not dsu.union(0, 3)


def test_count_decreases_once_per_successful_union():
    dsu = DisjointSetUnion(10)
    merges = 0
    for x, y in [(0, 1), (1, 2), (0, 2), (3, 4), (4, 3), (5, 6), (2, 6), (0, 6)]:
        if dsu.union(x, y):
            merges += 1
        assert dsu.count() == 10 - merges

    assert merges == 5


def test_union_by_rank_attaches_smaller_tree_under_larger():
    dsu = DisjointSetUnion(4)
    dsu.union(0, 1)  # root 0 with rank 1

    dsu.union(2, 0)  # 2 has rank 0, so it goes under 0
    assert dsu.find(2) == 0

    dsu.union(0, 3)
    assert dsu.find(3) == 0
    assert dsu._rank[0] == 1


def test_union_tie_makes_first_root_the_parent():
    dsu = DisjointSetUnion(4)
    dsu.union(0, 1)
    dsu.union(2, 3)

    dsu.union(2, 0)

    assert dsu.find(0) == 2
    assert dsu._rank[2] == 2


def test_connectivity_is_transitive():
    dsu = DisjointSetUnion(8)
    for x, y in [(0, 1), (2, 3), (1, 3), (5, 6)]:
        dsu.union(x, y)

    for x in range(8):
        for y in range(8):
            for z in range(8):
                if dsu.connected(x, y) and dsu.connected(y, z):
                    assert dsu.connected(x, z)


def test_merge_everything_into_one_set():
    dsu = DisjointSetUnion(50)
    for i in range(1, 50):
        dsu.union(0, i)

    assert dsu.count() == 1
    root = dsu.find(0)
    assert all(dsu.find(i) == root for i in range(50))


# -----------------------------------------------------------------------------
# find / path compression
# -----------------------------------------------------------------------------


def test_find_returns_common_representative():
    dsu = DisjointSetUnion(6)
    dsu.union(0, 1)
    dsu.union(1, 2)
    dsu.union(3, 4)

    rep = dsu.find(0)
    assert dsu.find(1) == rep
    assert dsu.find(2) == rep
    assert dsu.find(3) == dsu.find(4)
    assert dsu.find(5) == 5


def test_find_compresses_path_to_root():
    dsu = DisjointSetUnion(8)
    # Build a tree of height 3: 0 <- 4 <- 6 <- 7
    for x, y in [(0, 1), (2, 3), (4, 5), (6, 7), (0, 2), (4, 6), (0, 4)]:
        dsu.union(x, y)
    assert depth(dsu, 7) == 3

    root = dsu.find(7)

    assert root == 0
    assert dsu._parent[7] == root
    assert dsu._parent[6] == root
    assert dsu._parent[4] == root


def test_find_is_idempotent():
    dsu = chain(20)
    first = [dsu.find(i) for i in range(20)]
    parents = list(dsu._parent)

    second = [dsu.find(i) for i in range(20)]

    assert first == second
    assert dsu._parent == parents


def test_find_does_not_change_connectivity():
    dsu = DisjointSetUnion(12)
    for x, y in [(0, 1), (1, 2), (3, 4), (5, 6), (6, 7), (7, 8), (2, 8)]:
        dsu.union(x, y)
    before = [[dsu.connected(x, y) for y in range(12)] for x in range(12)]

    for _ in range(3):
        for i in reversed(range(12)):
            dsu.find(i)

    after = [[dsu.connected(x, y) for y in range(12)] for x in range(12)]
    assert before == after


def test_find_in_long_chain():
    dsu = chain(100)
    assert dsu.count() == 1

    root = dsu.find(99)

    for i in range(100):
        assert dsu.find(i) == root


def test_find_handles_large_universe_iteratively():
    size = 20000
    dsu = DisjointSetUnion(size)
    # Rank keeps trees shallow, but this also guards against recursion limits
    for i in range(size - 1):
        dsu.union(i + 1, i)

    assert dsu.count() == 1
    assert len({dsu.find(i) for i in range(size)}) == 1


# -----------------------------------------------------------------------------
# isolate
# -----------------------------------------------------------------------------


def test_isolate_middle_of_three():
    dsu = DisjointSetUnion(3)
    dsu.union(0, 1)
    dsu.union(1, 2)
    assert dsu.count() == 1

    dsu.isolate(1)

    assert dsu.count() == 2
    assert not dsu.connected(0, 1)
    assert not dsu.connected(1, 2)
    assert dsu.connected(0, 2)
    assert dsu.find(1) == 1


def test_isolate_after_compression_keeps_others_together():
    dsu = chain(5)
    assert dsu.count() == 1
    dsu.find(4)
    dsu.find(0)

    dsu.isolate(2)

    assert dsu.count() == 2
    assert dsu.find(2) == 2
    others = {dsu.find(i) for i in (0, 1, 3, 4)}
    assert len(others) == 1
    assert 2 not in others
    for i in range(5):
        if i != 2:
            assert not dsu.connected(i, 2)


def test_isolate_root_hands_set_to_another_member():
    dsu = chain(5)
    root = dsu.find(0)

    dsu.isolate(root)

    assert dsu.count() == 2
    assert dsu.find(root) == root
    members = [i for i in range(5) if i != root]
    new_roots = {dsu.find(i) for i in members}
    assert len(new_roots) == 1
    assert root not in new_roots
    assert dsu._rank[root] == 0


def test_isolate_root_of_pair():
    dsu = DisjointSetUnion(2)
    dsu.union(0, 1)

    dsu.isolate(0)

    assert dsu.count() == 2
    assert dsu.find(0) == 0
    assert dsu.find(1) == 1
    assert dsu._rank[1] == 0


def test_isolate_singleton_is_noop():
    dsu = DisjointSetUnion(3)
    dsu.union(1, 2)

    dsu.isolate(0)

    assert dsu.count() == 2
    assert dsu.find(0) == 0
    assert dsu.connected(1, 2)


def test_isolate_fresh_structure():
    dsu = DisjointSetUnion(1)

    dsu.isolate(0)

    assert dsu.count() == 1
    assert dsu.find(0) == 0


def test_isolate_twice_is_noop_the_second_time():
    dsu = chain(4)

    dsu.isolate(3)
    dsu.isolate(3)

    assert dsu.count() == 2


def test_isolate_non_root_with_uncompressed_child():
    dsu = DisjointSetUnion(4)
    dsu.union(0, 1)
    dsu.union(2, 3)
    # 2 keeps its child 3 when it goes under 0
    dsu.union(0, 2)
    assert dsu._parent[2] == 0
    assert dsu._parent[3] == 2

    dsu.isolate(2)

    assert dsu.count() == 2
    assert dsu.find(2) == 2
    assert not dsu.connected(3, 2)
    assert dsu.connected(3, 0)
    assert dsu.connected(3, 1)
    assert all(dsu._parent[i] != 2 for i in range(4) if i != 2)


def test_isolate_deep_internal_node_leaves_no_path_through_it():
    dsu = DisjointSetUnion(16)
    # Build a binomial tree of rank 4 without any compressing find calls
    # on the lower levels
    step = 1
    while step < 16:
        for i in range(0, 16, 2 * step):
            dsu.union(i, i + step)
        step *= 2

    internal = 8
    assert dsu._parent[internal] != internal
    assert any(dsu._parent[i] == internal for i in range(16) if i != internal)

    dsu.isolate(internal)

    assert dsu.count() == 2
    assert all(dsu._parent[i] != internal for i in range(16) if i != internal)
    rest = {dsu.find(i) for i in range(16) if i != internal}
    assert len(rest) == 1
    assert internal not in rest


def test_isolate_ensures_no_element_points_to_isolated_element():
    dsu = DisjointSetUnion(6)
    dsu.union(0, 1)
    dsu.union(1, 2)
    dsu.union(3, 4)
    dsu.union(4, 5)

    dsu.isolate(1)

    assert dsu.count() == 3
    for i in range(6):
        if i != 1:
            assert not dsu.connected(i, 1)
    assert dsu.connected(3, 5)


def test_isolate_multiple_consecutive_elements():
    dsu = chain(5)

    dsu.isolate(1)
    assert dsu.count() == 2
    dsu.isolate(3)
    assert dsu.count() == 3

    assert dsu.find(1) == 1
    assert dsu.find(3) == 3
    assert dsu.connected(0, 2)
    assert dsu.connected(2, 4)


def test_isolate_one_element_per_set():
    dsu = DisjointSetUnion(10)
    for x, y in [(0, 1), (1, 2), (2, 3), (4, 5), (5, 6), (7, 8), (8, 9)]:
        dsu.union(x, y)
    assert dsu.count() == 3

    for expected, element in enumerate((1, 5, 8), start=4):
        dsu.isolate(element)
        assert dsu.count() == expected

    for i in range(10):
        for isolated in (1, 5, 8):
            if i != isolated:
                assert not dsu.connected(i, isolated)


def test_isolated_element_can_be_merged_again():
    dsu = chain(4)
    dsu.isolate(0)

    assert dsu.union(0, 3) is True
    assert dsu.count() == 1
    assert dsu.connected(0, 1)


# -----------------------------------------------------------------------------
# Bounds errors
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "operation",
    [
        lambda d: d.find(-1),
        lambda d: d.find(5),
        lambda d: d.union(-1, 0),
        lambda d: d.union(4, 5),
        lambda d: d.connected(0, 5),
        lambda d: d.connected(-3, 1),
        lambda d: d.isolate(5),
        lambda d: d.isolate(-1),
        lambda d: d.find(1.0),
        lambda d: d.find(True),
        lambda d: d.find("1"),
    ],
)
def test_out_of_range_raises_and_leaves_state_unchanged(operation):
    dsu = DisjointSetUnion(5)
    # 3 -> 2 -> 0 stays uncompressed, so an accidental find would show up
    dsu.union(2, 3)
    dsu.union(0, 1)
    dsu.union(0, 2)
    before = snapshot(dsu)

    with pytest.raises(ElementOutOfRangeError):
        operation(dsu)

    assert snapshot(dsu) == before


def test_out_of_range_error_is_index_error():
    dsu = DisjointSetUnion(5)

    with pytest.raises(IndexError) as exc_info:
        dsu.find(5)

    assert isinstance(exc_info.value, DsuError)
    assert exc_info.value.element == 5
    assert exc_info.value.size == 5
    assert str(exc_info.value) == "Element (5) is out of disjoint set bounds: [0, 5)"


# -----------------------------------------------------------------------------
# Randomized comparison with a brute-force partition
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_match_brute_force(seed):
    rng = random.Random(seed)
    size = 40
    dsu = DisjointSetUnion(size)
    labels = list(range(size))
    next_label = size

    for _ in range(400):
        op = rng.random()
        x = rng.randrange(size)
        y = rng.randrange(size)

        if op < 0.55:
            expected = labels[x] != labels[y]
            assert dsu.union(x, y) is expected
            if expected:
                old = labels[y]
                labels = [labels[x] if label == old else label for label in labels]
        elif op < 0.75:
            dsu.find(x)
        else:
            if labels.count(labels[x]) > 1:
                labels[x] = next_label
                next_label += 1
            dsu.isolate(x)

        assert dsu.count() == len(set(labels))
        assert dsu.count() == sum(1 for i in range(size) if dsu._parent[i] == i)
        for i in range(size):
            # union by rank bounds every tree's height by its root's rank
            assert depth(dsu, i) <= dsu._rank[raw_root(dsu, i)]

    for i in range(size):
        for j in range(size):
            assert dsu.connected(i, j) == (labels[i] == labels[j])
