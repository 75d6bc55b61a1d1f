from union_find.weighted import WeightedQuickUnion


def test_equal_sizes_attach_q_under_p():
    uf = WeightedQuickUnion(2)
    uf.union(0, 1)
    assert uf.find(1) == 0
    assert uf._size[0] == 2


def test_smaller_tree_goes_under_larger_root():
    uf = WeightedQuickUnion(5)
    uf.union(0, 1)
    uf.union(0, 3)
    uf.union(2, 0)
    assert uf.find(2) == 0
    assert uf._size[0] == 4

    uf.union(4, 2)
    assert uf.find(4) == 0
    assert uf._size[0] == 5


def test_find_compresses_to_grandparent():
    uf = WeightedQuickUnion(4)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(0, 2)
    assert uf._parent[3] == 2
    assert uf._parent[2] == 0

    assert uf.find(3) == 0
    assert uf._parent[3] == 0


def test_sequential_unions_stay_shallow():
    size = 64
    uf = WeightedQuickUnion(size)
    for point in range(size - 1):
        uf.union(point, point + 1)

    root = uf.find(0)
    assert all(uf.find(point) == root for point in range(size))
    assert all(uf._parent[uf._parent[point]] == root for point in range(size))
    assert uf.count() == 1
