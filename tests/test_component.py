import pytest

from arbordesk.component import Entity, JoinComponent, ManyComponent, UniqueComponent
from arbordesk.ids import Id


def _many_consistent(comp):
    assert len(comp.items) == len(comp.idents) == len(comp.owners) == len(comp.lookup)
    for idx, ident in enumerate(comp.idents):
        assert comp.lookup[ident] == idx
        assert ident in comp.children(comp.owners[idx])


def _join_consistent(comp):
    assert len(comp.items) == len(comp.owners) == len(comp.parents)
    for idx, key in enumerate(comp.owners):
        assert comp.parents[key] == idx


# Entity


def test_entity_hands_out_sequential_ids():
    ent = Entity()
    assert [ent.add() for _ in range(3)] == [Id(0), Id(1), Id(2)]
    assert list(ent) == [Id(0), Id(1), Id(2)]


def test_entity_remove_and_clear_keep_counter():
    ent = Entity()
    a, b = ent.add(), ent.add()
    ent.remove(a)
    assert list(ent) == [b]
    assert a not in ent
    ent.clear()
    assert len(ent) == 0
    assert ent.add() not in (a, b)


# UniqueComponent


def test_unique_add_and_lookup():
    comp = UniqueComponent()
    comp.add(Id(10), "x")
    comp.add(Id(20), "y")
    assert comp[Id(10)] == "x"
    assert comp[Id(20)] == "y"
    assert len(comp) == 2


def test_unique_default_factory():
    comp = UniqueComponent(default=list)
    comp.add(Id(1))
    comp[Id(1)].append(5)
    assert comp[Id(1)] == [5]


def test_unique_without_item_or_default_raises():
    with pytest.raises(ValueError):
        UniqueComponent().add(Id(1))


def test_unique_duplicate_parent_raises():
    comp = UniqueComponent()
    comp.add(Id(1), "a")
    with pytest.raises(ValueError):
        comp.add(Id(1), "b")
    assert comp[Id(1)] == "a"


@pytest.mark.parametrize("victim", [0, 2, 4])
def test_unique_remove_swaps_last(victim):
    comp = UniqueComponent()
    for i in range(5):
        comp.add(Id(i), f"item{i}")
    comp.remove(Id(victim))
    comp.check()
    assert Id(victim) not in comp
    for i in range(5):
        if i != victim:
            assert comp[Id(i)] == f"item{i}"


def test_unique_remove_missing_raises():
    with pytest.raises(KeyError):
        UniqueComponent().remove(Id(3))


def test_unique_check_detects_corruption():
    comp = UniqueComponent()
    comp.add(Id(1), "a")
    comp.add(Id(2), "b")
    comp.parents[Id(1)] = 1
    with pytest.raises(RuntimeError):
        comp.check()


def test_unique_clear():
    comp = UniqueComponent()
    comp.add(Id(1), "a")
    comp.clear()
    assert len(comp) == 0 and Id(1) not in comp


# ManyComponent


def test_many_children_grouped_by_parent():
    comp = ManyComponent()
    a = comp.add(Id(100), "a")
    b = comp.add(Id(100), "b")
    c = comp.add(Id(200), "c")
    assert comp.children(Id(100)) == [a, b]
    assert comp.children(Id(200)) == [c]
    assert comp.children(Id(300)) == []
    assert comp[b] == "b"
    _many_consistent(comp)


def test_many_ids_are_unique():
    comp = ManyComponent()
    ids = [comp.add(Id(i % 3), i) for i in range(9)]
    assert len(set(ids)) == 9


def test_many_remove_keeps_others():
    comp = ManyComponent()
    ids = [comp.add(Id(i % 2), i) for i in range(6)]
    comp.remove(ids[1])
    _many_consistent(comp)
    assert ids[1] not in comp
    for i, ident in enumerate(ids):
        if i != 1:
            assert comp[ident] == i
    assert ids[1] not in comp.children(Id(1))


def test_many_remove_last_item():
    comp = ManyComponent()
    only = comp.add(Id(1), "only")
    comp.remove(only)
    assert len(comp) == 0
    assert comp.children(Id(1)) == []


def test_many_remove_children():
    comp = ManyComponent()
    keep = comp.add(Id(2), "keep")
    for i in range(4):
        comp.add(Id(1), i)
    comp.remove_children(Id(1))
    _many_consistent(comp)
    assert list(comp) == [keep]
    assert comp.children(Id(1)) == []


def test_many_remove_missing_raises():
    with pytest.raises(KeyError):
        ManyComponent().remove(Id(0))


def test_many_clear():
    comp = ManyComponent(default=dict)
    comp.add(Id(1))
    comp.clear()
    assert len(comp) == 0 and comp.children(Id(1)) == []


# JoinComponent


def test_join_add_and_lookup():
    comp = JoinComponent()
    comp.add(Id(1), Id(2), "ab")
    assert comp[(Id(1), Id(2))] == "ab"
    assert (Id(2), Id(1)) not in comp


def test_join_duplicate_raises():
    comp = JoinComponent()
    comp.add(Id(1), Id(2), "ab")
    with pytest.raises(ValueError):
        comp.add(Id(1), Id(2), "again")


def test_join_remove():
    comp = JoinComponent()
    for a in range(3):
        for b in range(3):
            comp.add(Id(a), Id(b), (a, b))
    comp.remove((Id(0), Id(0)))
    _join_consistent(comp)
    assert (Id(0), Id(0)) not in comp
    assert comp[(Id(2), Id(2))] == (2, 2)


def test_join_remove_by_first_and_second():
    comp = JoinComponent()
    for a in range(3):
        for b in range(3):
            comp.add(Id(a), Id(b), (a, b))
    comp.remove_by_first(Id(1))
    _join_consistent(comp)
    assert all(key[0] != Id(1) for key in comp)
    comp.remove_by_second(Id(2))
    _join_consistent(comp)
    assert all(key[1] != Id(2) for key in comp)
    assert sorted(comp[k] for k in comp) == [(0, 0), (0, 1), (2, 0), (2, 1)]


def test_join_clear():
    comp = JoinComponent(default=int)
    comp.add(Id(1), Id(1))
    comp.clear()
    assert len(comp) == 0