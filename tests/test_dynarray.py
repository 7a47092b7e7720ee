import pytest

from ministructs.dynarray import DynArray

EMPTY = "Massive is empty"
RANGE = "Index is bigger than massive has"


def filled(*items):
    mas = DynArray()
    for item in items:
        mas.append(item)
    return mas


@pytest.mark.parametrize(
    ("items", "expected"),
    [((), "Massive is empty"), (("Alice",), "Massive output:\nAlice")],
)
def test_render(items, expected):
    assert filled(*items).render() == expected


def test_append_and_get():
    mas = filled("Alice", "Bob")
    assert [mas.get(0), mas.get(1)] == ["Alice", "Bob"]
    enter = "1"
    while len(mas) < 9:
        mas.append(enter)
        enter += "a"
    mas.append("13")
    assert mas[len(mas) - 1] == "13"


def test_insert():
    mas = filled("Alice")
    mas.insert(0, "Bob")
    assert list(mas) == ["Bob", "Alice"]
    enter = "1"
    while len(mas) < 10:
        mas.append(enter)
        enter += "a"
    mas.insert(len(mas) - 1, "13")
    assert mas[len(mas) - 2] == "13"


def test_pop():
    mas = filled("Alice", "Bob")
    assert mas.pop(0) == "Alice"
    assert mas.get(0) == "Bob"


def test_pop_at_length_removes_last():
    mas = filled("Alice", "Bob")
    assert mas.pop(2) == "Bob"
    assert list(mas) == ["Alice"]


def test_replace():
    mas = filled("Alice", "Bob")
    mas[0] = "Rusy"
    assert list(mas) == ["Rusy", "Bob"]


def test_size_of_new_array():
    mas = DynArray()
    assert (len(mas), mas.is_empty()) == (0, True)


@pytest.mark.parametrize(
    ("items", "action", "message"),
    [
        ((), lambda m: m.insert(1, "123"), EMPTY),
        ((), lambda m: m.get(1), EMPTY),
        ((), lambda m: m.pop(0), EMPTY),
        ((), lambda m: m.__setitem__(0, "x"), EMPTY),
        (("Bob", "Alice"), lambda m: m.insert(7, "Bob"), RANGE),
        (("Bob", "Alice"), lambda m: m.get(7), RANGE),
        (("Bob",), lambda m: m.pop(7), RANGE),
        (("Alice",), lambda m: m.__setitem__(1, "Bob"), RANGE),
    ],
)
def test_errors_leave_array_unchanged(items, action, message):
    mas = filled(*items)
    with pytest.raises(IndexError, match=message):
        action(mas)
    assert list(mas) == list(items)


def test_pop_everything():
    mas = filled(*["item"] * 10)
    assert [mas.pop(0) for _ in range(10)] == ["item"] * 10
    assert mas.is_empty()