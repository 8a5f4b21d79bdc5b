import random

from algokit.heap import build_max_heap, build_min_heap, format_heaps


def _is_heap(heap, ok):
    return all(
        ok(heap[(i - 1) // 2], heap[i]) for i in range(1, len(heap))
    )


def test_small_max_heap():
    assert build_max_heap([1, 2, 3]) == [3, 2, 1]


def test_small_min_heap():
    assert build_min_heap([3, 2, 1]) == [1, 2, 3]


def test_empty():
    assert build_max_heap([]) == []
    assert build_min_heap([]) == []


def test_random_max_heap_property_and_permutation():
    rng = random.Random(3)
    for _ in range(25):
        data = [rng.randint(-100, 100) for _ in range(rng.randint(0, 40))]
        heap = build_max_heap(data)
        assert sorted(heap) == sorted(data)
        assert _is_heap(heap, lambda parent, child: parent >= child)


def test_random_min_heap_property_and_permutation():
    rng = random.Random(11)
    for _ in range(25):
        data = [rng.randint(-100, 100) for _ in range(rng.randint(0, 40))]
        heap = build_min_heap(data)
        assert sorted(heap) == sorted(data)
        assert _is_heap(heap, lambda parent, child: parent <= child)


def test_input_not_modified():
    data = [5, 1, 4]
    build_max_heap(data)
    build_min_heap(data)
    assert data == [5, 1, 4]


def test_format_single_value():
    assert format_heaps([7]) == "max heap: \n7\nmin heap: \n7\n"


def test_format_layout():
    data = [4, 9, 2, 6]
    lines = format_heaps(data).splitlines()
    assert lines[0] == "max heap: "
    assert lines[5] == "min heap: "
    assert [int(x) for x in lines[1:5]] == build_max_heap(data)
    assert [int(x) for x in lines[6:10]] == build_min_heap(data)