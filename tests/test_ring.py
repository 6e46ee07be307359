import pytest

from cubkit.ring import Ring, RingElem


class Foo(RingElem):
    def __init__(self, x):
        super().__init__()
        self.x = x


def values(ring):
    return [e.x for e in ring]


@pytest.fixture
def elems():
    return Ring()


def test_empty_when_init(elems):
    assert elems.first() is None
    assert elems.last() is None
    assert elems.is_empty() is True
    assert len(elems) == 0


def test_get_elem_when_not_empty(elems):
    elem = Foo(1)
    elems.push_back(elem)
    assert elems.is_empty() is False
    assert len(elems) == 1
    assert elems.first() is elem
    assert elems.last() is elem
    first = elems.pop_front()
    assert first.x == 1
    assert elems.is_empty() is True


def test_travel_list(elems):
    for i in (1, 2, 3):
        elems.push_back(Foo(i))
    assert values(elems) == [1, 2, 3]


def test_next_of_last_is_end(elems):
    elem = Foo(1)
    elems.push_back(elem)
    assert elems.first() is elem
    assert elems.next_of(elem) is None
    assert elems.prev_of(elem) is None


def test_push_front_and_pop_back(elems):
    elems.push_back(Foo(2))
    elems.push_front(Foo(1))
    elems.push_back(Foo(3))
    assert values(elems) == [1, 2, 3]
    assert elems.pop_back().x == 3
    assert values(elems) == [1, 2]


def test_reversed(elems):
    for i in (1, 2, 3):
        elems.push_back(Foo(i))
    assert [e.x for e in reversed(elems)] == [3, 2, 1]


def test_pop_from_empty_raises(elems):
    with pytest.raises(IndexError):
        elems.pop_front()
    with pytest.raises(IndexError):
        elems.pop_back()


def test_remove_middle(elems):
    a, b, c = Foo(1), Foo(2), Foo(3)
    for e in (a, b, c):
        elems.push_back(e)
    elems.remove(b)
    assert values(elems) == [1, 3]
    assert elems.next_of(a) is c
    assert b.in_ring is False


def test_elem_remove_itself(elems):
    a, b = Foo(1), Foo(2)
    elems.push_back(a)
    elems.push_back(b)
    a.remove()
    assert values(elems) == [2]
    with pytest.raises(ValueError):
        a.remove()


def test_remove_during_iteration(elems):
    for i in range(1, 6):
        elems.push_back(Foo(i))
    for e in elems:
        if e.x % 2 == 0:
            elems.remove(e)
    assert values(elems) == [1, 3, 5]


def test_insert_before_and_after(elems):
    a, c = Foo(1), Foo(3)
    elems.push_back(a)
    elems.push_back(c)
    elems.insert_before(c, Foo(2))
    elems.insert_after(c, Foo(4))
    elems.insert_before(a, Foo(0))
    assert values(elems) == [0, 1, 2, 3, 4]
    assert elems.prev_of(a).x == 0


def test_double_insert_raises(elems):
    a = Foo(1)
    elems.push_back(a)
    with pytest.raises(ValueError):
        elems.push_back(a)
    other = Ring()
    with pytest.raises(ValueError):
        other.push_back(a)


def test_remove_foreign_elem_raises(elems):
    other = Ring()
    a = Foo(1)
    other.push_back(a)
    with pytest.raises(ValueError):
        elems.remove(a)
    with pytest.raises(ValueError):
        elems.next_of(a)


def test_push_non_elem_raises(elems):
    with pytest.raises(TypeError):
        elems.push_back(object())


def test_concat(elems):
    other = Ring()
    elems.push_back(Foo(1))
    other.push_back(Foo(2))
    other.push_back(Foo(3))
    elems.concat(other)
    assert values(elems) == [1, 2, 3]
    assert other.is_empty() is True
    moved = elems.last()
    assert moved in elems
    elems.remove(moved)
    assert values(elems) == [1, 2]


def test_prepend(elems):
    other = Ring()
    elems.push_back(Foo(3))
    other.push_back(Foo(1))
    other.push_back(Foo(2))
    elems.prepend(other)
    assert values(elems) == [1, 2, 3]
    assert len(other) == 0


def test_concat_empty_and_self(elems):
    elems.push_back(Foo(1))
    elems.concat(Ring())
    assert values(elems) == [1]
    with pytest.raises(ValueError):
        elems.concat(elems)


def test_reuse_after_pop(elems):
    a = Foo(7)
    elems.push_back(a)
    elems.pop_front()
    other = Ring()
    other.push_back(a)
    assert values(other) == [7]
    assert a not in elems