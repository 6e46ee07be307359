import pytest

from cubkit.ringnumber import RingNumber


def test_equal_when_init_equal():
    assert RingNumber(1, 10) == RingNumber(11, 10)


def test_unequal_when_init_unequal():
    assert (RingNumber(2, 10) == RingNumber(11, 10)) is False


def test_equal_after_increment():
    r1 = RingNumber(2, 10)
    r2 = RingNumber(11, 10)
    assert r1 == r2.increment()


def test_equal_after_moves():
    r1 = RingNumber(4, 10)
    r2 = RingNumber(11, 10)
    assert (r1 << 2) == (r2 >> 11)


def test_increment_wraps_to_zero():
    r = RingNumber(9, 10)
    r.increment()
    assert int(r) == 0


def test_decrement_wraps_to_top():
    r = RingNumber(0, 10)
    r.decrement()
    assert int(r) == 9


def test_shift_in_place_returns_same_object():
    r = RingNumber(4, 10)
    same = r
    r >>= 3
    assert r is same
    assert int(r) == 7
    r <<= 3
    assert int(r) == 4


@pytest.mark.parametrize("a, b", [(0, 0), (3, 7), (7, 3), (9, 1)])
def test_difference_round_trip(a, b):
    ra = RingNumber(a, 10)
    rb = RingNumber(b, 10)
    assert (rb >> (ra - rb)) == int(ra)


def test_shift_operators_do_not_change_value():
    r = RingNumber(5, 10)
    r >> 3
    r << 3
    assert int(r) == 5


def test_invalid_modulus():
    with pytest.raises(ValueError):
        RingNumber(1, 0)