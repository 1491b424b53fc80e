import pytest

from toolkit.iteration import new_slice_iterator


def test_string_slice_as_any():
    iterator = new_slice_iterator(["a", "r", "c"])
    assert iterator.has_next()
    assert iterator.next_as() == "a"
    assert iterator.has_next()
    assert iterator.next_as() == "r"
    assert iterator.has_next()
    assert iterator.next_as() == "c"
    assert not iterator.has_next()


def test_string_slice_as_string():
    iterator = new_slice_iterator(["a", "r", "c"])
    assert iterator.has_next()
    assert iterator.next_as(str) == "a"
    assert iterator.has_next()
    assert iterator.next_as(str) == "r"
    assert iterator.has_next()
    assert iterator.next_as(str) == "c"


def test_mixed_slice():
    iterator = new_slice_iterator(["a", "z", "c"])
    assert iterator.has_next()
    assert iterator.next_as(str) == "a"
    assert iterator.has_next()
    assert iterator.next_as(str) == "z"
    values = [None]
    assert iterator.has_next()
    values[0] = iterator.next_as()
    assert values[0] == "c"


def test_int_slice():
    iterator = new_slice_iterator([3, 2, 1])
    assert iterator.has_next()
    assert iterator.next_as(int) == 3
    assert iterator.has_next()
    assert iterator.next_as(int) == 2
    assert iterator.has_next()
    assert iterator.next_as(int) == 1


def test_exhausted_iterator_stops():
    iterator = new_slice_iterator([1])
    assert iterator.next_as() == 1
    with pytest.raises(StopIteration):
        iterator.next_as()


def test_python_iteration_protocol():
    assert list(new_slice_iterator((x for x in [3, 2, 1]))) == [3, 2, 1]


def test_rejects_non_sequence():
    with pytest.raises(TypeError):
        new_slice_iterator(5)
    with pytest.raises(TypeError):
        new_slice_iterator("abc")