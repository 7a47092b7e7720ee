import pytest

from ministructs.slist import SinglyLinkedList


def make(*items):
    lst = SinglyLinkedList()
    for item in items:
        lst.push_back(item)
    return lst


@pytest.mark.parametrize(
    ("items", "expected"), [((), "List is empty!"), (("AE",), "List output\nAE")]
)
def test_render(items, expected):
    assert make(*items).render() == expected


@pytest.mark.parametrize(
    ("method", "items", "expected"),
    [("push_back", "BCD", ["B", "C", "D"]), ("push_front", "AB", ["B", "A"])],
)
def test_push(method, items, expected):
    lst = SinglyLinkedList()
    for item in items:
        getattr(lst, method)(item)
    assert (list(lst), len(lst), lst.find("Z")) == (expected, len(expected), [])


@pytest.mark.parametrize(
    ("method", "items", "popped", "rest"),
    [("pop_front", "BC", "B", ["C"]), ("pop_back", "ABC", "C", ["A", "B"])],
)
def test_pop_one(method, items, popped, rest):
    lst = make(*items)
    assert getattr(lst, method)() == popped
    assert (lst.find(popped), list(lst)) == ([], rest)


def test_pop_back_until_empty():
    lst = make("A", "B", "C")
    assert [lst.pop_back() for _ in range(3)] == ["C", "B", "A"]
    assert (lst.is_empty(), len(lst)) == (True, 0)


@pytest.mark.parametrize(
    ("method", "args", "error"),
    [("pop_front", (), IndexError), ("pop_back", (), IndexError), ("remove", ("123",), ValueError)],
)
def test_empty_list_raises(method, args, error):
    lst = SinglyLinkedList()
    with pytest.raises(error):
        getattr(lst, method)(*args)
    assert lst.find("123") == []


def test_pop_znach():
    lst = make("B", "C")
    lst.push_front("A")
    lst.remove("B")
    assert list(lst) == ["A", "C"]
    lst.remove("A")
    assert list(lst) == ["C"]
    with pytest.raises(ValueError):
        lst.remove("R")
    for item in ("B", "C", "A"):
        lst.push_back(item)
    lst.remove("A")
    assert list(lst) == ["C", "B", "C"]


@pytest.mark.parametrize(
    ("items", "target", "expected"),
    [("xxyxx", "x", ["y"]), ("ab", "b", ["a"]), ("aba", "a", ["b"])],
)
def test_remove_all_occurrences(items, target, expected):
    lst = make(*items)
    lst.remove(target)
    assert (list(lst), len(lst)) == (expected, len(expected))


def test_push_back_after_removing_tail():
    lst = make("a", "b")
    lst.remove("b")
    lst.push_back("c")
    assert list(lst) == ["a", "c"]
    assert lst.pop_back() == "c"


def test_find_reports_every_position():
    assert make("a", "b", "a").find("a") == [0, 2]


def test_push_pop_cycle_leaves_list_empty():
    lst = SinglyLinkedList()
    popped = []
    for _ in range(100):
        lst.push_back("item")
        popped.append(lst.pop_back())
    assert popped == ["item"] * 100
    assert list(lst) == []