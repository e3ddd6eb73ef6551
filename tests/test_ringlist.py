import pytest

from kpworks.ringlist import EMPTY, RingList


def test_push_back_keeps_order():
    ring = RingList()
    for item in "abc":
        ring.push_back(item)
    assert list(ring) == ["a", "b", "c"]


def test_push_front_reverses_order():
    ring = RingList()
    for item in "abc":
        ring.push_front(item)
    assert list(ring) == ["c", "b", "a"]


def test_insert_at_length_equals_push_back():
    inserted = RingList("ab")
    inserted.insert(2, "z")
    pushed = RingList("ab")
    pushed.push_back("z")
    assert inserted == pushed


def test_insert_into_empty_at_zero():
    ring = RingList()
    ring.insert(0, "q")
    assert list(ring) == ["q"]


def test_insert_in_the_middle():
    ring = RingList("ac")
    ring.insert(1, "b")
    assert list(ring) == ["a", "b", "c"]


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_out_of_range(index):
    ring = RingList("ab")
    with pytest.raises(IndexError):
        ring.insert(index, "x")
    assert list(ring) == ["a", "b"]


def test_pop_front_and_back_return_items():
    ring = RingList("abc")
    assert ring.pop_front() == "a"
    assert ring.pop_back() == "c"
    assert list(ring) == ["b"]


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_from_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(RingList(), method)()


def test_delete_middle():
    ring = RingList("abc")
    assert ring.delete(1) == "b"
    assert list(ring) == ["a", "c"]


def test_delete_at_length_wraps_to_first():
    ring = RingList("abc")
    assert ring.delete(3) == "a"
    assert list(ring) == ["b", "c"]


def test_delete_from_empty_does_nothing():
    ring = RingList()
    assert ring.delete(0) is None
    assert len(ring) == 0


def test_delete_out_of_range():
    with pytest.raises(IndexError):
        RingList("ab").delete(5)


def test_drop_last_more_than_length_leaves_ring():
    ring = RingList("abc")
    ring.drop_last(4)
    assert list(ring) == ["a", "b", "c"]


def test_drop_last_removes_tail():
    ring = RingList("abcd")
    ring.drop_last(2)
    assert list(ring) == ["a", "b"]
    ring.drop_last(2)
    assert len(ring) == 0


def test_drop_last_negative_raises():
    with pytest.raises(ValueError):
        RingList("a").drop_last(-1)


def test_render():
    assert RingList("ab").render() == "(a, b)"
    assert RingList().render() == EMPTY


def test_items_must_be_single_characters():
    with pytest.raises(ValueError):
        RingList().push_back("ab")