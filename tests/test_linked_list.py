import pytest

from algopractice.linked_list import LinkedList, Node, merge_sorted


def test_iteration_keeps_given_order():
    values = [0, 1, 2, 3, 4]
    assert list(LinkedList(values)) == values


def test_empty_list():
    empty = LinkedList()
    assert len(empty) == 0
    assert list(empty) == []
    assert str(empty) == ""


def test_len_counts_nodes():
    values = [1, 2, 1, 3, 1]
    assert len(LinkedList(values)) == len(values)


def test_push_front_builds_in_reverse():
    ll = LinkedList()
    for value in [4, 3, 2, 1, 0]:
        ll.push_front(value)
    assert list(ll) == [0, 1, 2, 3, 4]
    assert isinstance(ll.head, Node) and ll.head.data == 0


def test_str_format():
    assert str(LinkedList([1, 2])) == "1-->2-->"


def test_insert_in_middle():
    values = [0, 1, 2, 3, 4]
    ll = LinkedList(values)
    ll.insert(3, 100)
    assert list(ll) == values[:3] + [100] + values[3:]


def test_insert_at_zero_and_end():
    values = [5, 6, 7]
    ll = LinkedList(values)
    ll.insert(0, 9)
    ll.insert(len(ll), 8)
    assert list(ll) == [9] + values + [8]


def test_insert_into_empty_at_zero():
    ll = LinkedList()
    ll.insert(0, 42)
    assert list(ll) == [42]


@pytest.mark.parametrize("position", [-1, 5, 10])
def test_insert_out_of_range(position):
    ll = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        ll.insert(position, 7)
    assert list(ll) == [1, 2, 3]


@pytest.mark.parametrize(
    "values",
    [
        [14, 2, 17, 1, 5, 7, 10],
        [],
        [3],
        [2, 1],
        [5, 5, 1, 5, 0],
        list(range(20, 0, -1)),
    ],
)
def test_sort_matches_sorted(values):
    ll = LinkedList(values)
    ll.sort()
    assert list(ll) == sorted(values)
    assert len(ll) == len(values)


def test_merge_sorted():
    first = LinkedList([1, 5, 7, 10])
    second = LinkedList([2, 3, 6])
    merged = merge_sorted(first, second)
    assert list(merged) == sorted([1, 5, 7, 10, 2, 3, 6])


def test_merge_sorted_leaves_inputs_untouched():
    first = LinkedList([1, 4])
    second = LinkedList([2, 4, 9])
    merge_sorted(first, second)
    assert list(first) == [1, 4]
    assert list(second) == [2, 4, 9]


def test_merge_with_empty():
    values = [1, 2, 3]
    assert list(merge_sorted(LinkedList(), LinkedList(values))) == values
    assert list(merge_sorted(LinkedList(values), LinkedList())) == values