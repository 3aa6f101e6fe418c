# tests/test_unionfind.py
from hexweave.unionfind import UnionFind


def test_singletons():
    uf = UnionFind([(0, 0), (1, 0), (2, 0)])
    assert len(uf) == 3
    assert uf.components() == 3
    assert uf.find((1, 0)) == (1, 0)
    assert not uf.connected((0, 0), (1, 0))

def test_union_attaches_second_root_under_first():
    uf = UnionFind("abcd")
    assert uf.union("a", "b") is True
    assert uf.find("b") == "a"
    assert uf.union("c", "b") is True
    # b's root (a) now hangs under c
    assert uf.find("a") == "c"
    assert uf.find("b") == "c"
    assert uf.connected("a", "c")
    assert uf.components() == 2

def test_union_of_connected_is_noop():
    uf = UnionFind("abc")
    uf.union("a", "b")
    before = dict(uf.parent)
    assert uf.union("b", "a") is False
    assert uf.parent == before

def test_membership():
    uf = UnionFind()
    uf.add((3, 4))
    uf.add((3, 4))
    assert (3, 4) in uf
    assert (4, 3) not in uf
    assert len(uf) == 1
