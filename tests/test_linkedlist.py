import pytest

from libft.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_init_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList()
    lst.push_front(1)
    lst.push_front(2)
    node = lst.push_front(3)
    assert list(lst) == [3, 2, 1]
    assert lst.head is node
    assert lst.last().content == 1


def test_append_appends():
    lst = LinkedList()
    lst.append("x")
    node = lst.append("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() is node
    assert node.next is None


def test_mixed_insertions():
    lst = LinkedList([2])
    lst.push_front(1)
    lst.append(3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_nodes_are_linked():
    lst = LinkedList(["a", "b"])
    assert isinstance(lst.head, Node)
    assert lst.head.content == "a"
    assert lst.head.next.content == "b"
    assert lst.head.next.next is None


def test_last_on_single_element():
    lst = LinkedList()
    lst.push_front("only")
    assert lst.last() is lst.head


def test_remove_first_returns_content_and_calls_delete():
    deleted = []
    lst = LinkedList(["a", "b"])
    assert lst.remove_first(deleted.append) == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]
    assert len(lst) == 1


def test_remove_first_without_delete():
    lst = LinkedList(["a"])
    assert lst.remove_first() == "a"
    assert len(lst) == 0
    assert lst.last() is None


def test_remove_first_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_append_after_emptying():
    lst = LinkedList(["a"])
    lst.remove_first()
    lst.append("b")
    assert list(lst) == ["b"]
    assert lst.last().content == "b"


def test_clear_calls_delete_in_order():
    deleted = []
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_each_content():
    seen = []
    items = [1, 2, 3]
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_map_builds_new_list():
    items = ["a", "b"]
    source = LinkedList(items)
    mapped = source.map(str.upper, lambda _: None)
    assert list(mapped) == [s.upper() for s in items]
    assert list(source) == items
    assert mapped is not source


def test_map_empty_list():
    mapped = LinkedList().map(str.upper, lambda _: None)
    assert len(mapped) == 0


def test_map_failure_deletes_produced_contents():
    deleted = []

    def f(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [10, 20]


@pytest.mark.parametrize("f, delete", [(None, print), (str, None)])
def test_map_requires_callables(f, delete):
    with pytest.raises(TypeError):
        LinkedList(["a"]).map(f, delete)