from rustlings.exercises.smart_pointers import (
    Cons,
    Cow,
    abs_all,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty != create_empty_list()
    assert len(list(non_empty)) >= 1


def test_cons_iterates_in_order():
    assert list(Cons(3, Cons(4))) == [3, 4]


def test_reference_mutation():
    slice_ = (-1, 0, 1)
    cow = abs_all(Cow(slice_))
    assert cow.owned is True
    assert list(cow) == [1, 0, 1]
    assert slice_ == (-1, 0, 1)


def test_reference_no_mutation():
    slice_ = (0, 1, 2)
    cow = abs_all(Cow(slice_))
    assert cow.owned is False
    assert cow.data is slice_


def test_owned_no_mutation():
    data = [0, 1, 2]
    cow = abs_all(Cow(data, owned=True))
    assert cow.owned is True
    assert cow.data is data
    assert data == [0, 1, 2]


def test_owned_mutation():
    data = [-1, 0, 1]
    cow = abs_all(Cow(data, owned=True))
    assert cow.owned is True
    assert cow.data is data
    assert data == [1, 0, 1]