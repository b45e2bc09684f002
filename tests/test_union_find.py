"""Tests for the disjoint-set helper."""

from labyrinth.domain.union_find import UnionFind


def test_singletons_are_disconnected():
    sets = UnionFind([(1, 1), (3, 1)])
    assert len(sets) == 2
    assert not sets.connected((1, 1), (3, 1))


def test_union_merges_once():
    sets = UnionFind([(1, 1), (3, 1), (5, 1)])
    assert sets.union((1, 1), (3, 1))
    assert not sets.union((3, 1), (1, 1))
    assert sets.connected((1, 1), (3, 1))
    assert not sets.connected((1, 1), (5, 1))


def test_transitive_connection():
    cells = [(x, 1) for x in range(1, 20, 2)]
    sets = UnionFind(cells)
    for a, b in zip(cells, cells[1:]):
        assert sets.union(a, b)

    root = sets.find(cells[0])
    assert all(sets.find(cell) == root for cell in cells)
    # Every edge beyond a spanning tree closes a cycle
    assert not sets.union(cells[0], cells[-1])


def test_add_is_idempotent():
    sets = UnionFind()
    sets.add((1, 1))
    sets.add((1, 1))
    assert (1, 1) in sets
    assert (3, 3) not in sets
    assert len(sets) == 1


def test_find_handles_deep_chains_and_compresses():
    # Deeper than the default recursion limit
    cells = [(x, 1) for x in range(5000)]
    sets = UnionFind(cells)
    for child, parent in zip(cells[1:], cells):
        sets._parent[child] = parent

    assert sets.find(cells[-1]) == cells[0]
    assert sets._parent[cells[-1]] == cells[0]
    assert sets._parent[cells[2500]] == cells[0]
