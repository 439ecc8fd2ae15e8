import random

import pytest

import binomial_heaps
import heap_experiments
from binomial_heaps import Heap, VARIANTS


@pytest.fixture(autouse=True)
def seed():
    random.seed(20260115)


@pytest.fixture(params=list(VARIANTS))
def variant(request):
    return request.param


def heap_with(variant, keys):
    heap = Heap.variant(variant)
    items = [heap.insert(key, str(key)) for key in keys]
    heap.validate()
    return heap, items


def test_variant_flags():
    assert Heap.variant('binomial').policy() == (False, False)
    assert Heap.variant('lazy_binomial').policy() == (True, False)
    assert Heap.variant('fibonacci').policy() == (True, True)
    assert Heap.variant('binomial_with_cuts').policy() == (False, True)
    assert Heap().policy() == (False, False)


def test_empty(variant):
    heap = Heap.variant(variant)
    assert heap.empty()
    assert heap.find_min() is None
    heap.delete_min()
    heap.delete(None)
    heap.decrease_key(None, 1)
    heap.validate()
    assert heap.size() == 0
    assert heap.num_trees() == 0
    assert heap.total_links() == heap.total_cuts() == 0


def test_examples(variant):
    binomial_heaps.test_examples(variant)


def test_round_trip(variant):
    heap, (a, b, c) = heap_with(variant, [10, 3, 7])
    heap.delete_min()
    heap.validate()
    assert b.deleted()
    assert heap.find_min() is c
    assert heap.find_min().key() == 7


def test_decrease_to_new_min(variant):
    heap, (a, b, c) = heap_with(variant, [10, 3, 7])
    heap.decrease_key(a, 9)
    heap.validate()
    assert heap.find_min() is a
    assert heap.find_min().key() == 1


def test_delete_max_int(variant):
    heap, (big, small) = heap_with(variant, [2 ** 31 - 1, 2])
    heap.delete(big)
    heap.validate()
    assert heap.find_min() is small
    assert heap.find_min().key() == 2
    assert heap.size() == 1


def test_delete_min_item(variant):
    heap, (a, b) = heap_with(variant, [5, 8])
    heap.delete(a)
    heap.validate()
    assert heap.find_min() is b


def test_negative_keys(variant):
    heap, items = heap_with(variant, [4, 9, 6, 1])
    heap.delete_min()
    heap.decrease_key(items[1], 20)
    heap.validate()
    assert heap.find_min().item() == (-11, '9')
    heap.insert(-3)
    heap.validate()
    keys = []
    while not heap.empty():
        keys.append(heap.find_min().key())
        heap.delete_min()
        heap.validate()
    assert keys == [-11, -3, 4, 6]


def test_invalid_decrease_is_ignored(variant):
    heap, (a, b) = heap_with(variant, [5, 8])
    heap.decrease_key(b, 0)
    heap.decrease_key(b, -3)
    assert b.key() == 8
    heap.delete(b)
    key = b.key()
    heap.decrease_key(b, 1)
    heap.delete(b)
    heap.validate()
    assert b.key() == key
    assert heap.size() == 1
    assert heap.find_min() is a


def test_meld_absorbs(variant):
    heap1, _ = heap_with(variant, [5, 50])
    heap2, (y1, y2) = heap_with(variant, [4, 6])
    links = heap1.total_links() + heap2.total_links()
    heap1.meld(heap2)
    heap1.validate()
    heap2.validate()
    assert heap2.empty()
    assert heap2.find_min() is None
    assert heap2.num_trees() == 0
    assert heap2.num_marked_nodes() == 0
    assert heap1.size() == 4
    assert heap1.find_min() is y1
    assert heap1.total_links() >= links


def test_meld_into_empty(variant):
    heap1 = Heap.variant(variant)
    heap2, items = heap_with(variant, [3, 1, 2])
    heap1.meld(heap2)
    heap1.validate()
    assert heap2.empty()
    assert heap1.find_min() is items[1]
    assert heap1.size() == 3


def test_meld_policy_mismatch():
    with pytest.raises(AssertionError):
        Heap.variant('binomial').meld(Heap.variant('fibonacci'))


def test_no_cut_on_delete_min():
    for variant in ('fibonacci', 'binomial_with_cuts'):
        heap, _ = heap_with(variant, range(1, 33))
        cuts = heap.total_cuts()
        heap.delete_min()
        heap.validate()
        assert heap.total_cuts() == cuts
        assert heap.find_min().key() == 2


def test_delete_min_unmarks_children_without_cuts():
    for variant in ('fibonacci', 'binomial_with_cuts'):
        heap, items = heap_with(variant, range(1, 18))
        heap.delete_min()
        root = heap.find_min()._node
        assert root.item().key() == 2
        child = next(c for c in root.children()
                     if c._rank >= 1 and c.item().key() >= 4)
        leaf = next(c for c in child.children() if c._rank == 0)
        # leaf moves below child but stays above the root
        heap.decrease_key(leaf.item(), leaf.item().key() - 3)
        heap.validate()
        assert child._mark
        assert heap.num_marked_nodes() == 1
        assert heap.find_min() is root.item()
        cuts = heap.total_cuts()
        heap.delete_min()
        heap.validate()
        assert not child._mark
        assert heap.num_marked_nodes() == 0
        assert heap.total_cuts() == cuts
        assert heap.find_min().key() == 3


def test_binomial_keeps_distinct_ranks():
    heap, _ = heap_with('binomial', range(1, 12))
    # 11 = 8 + 2 + 1
    assert heap.num_trees() == 3
    assert sorted(root._rank for root in heap.roots()) == [0, 1, 3]
    assert heap.total_links() == 8


def test_lazy_binomial_defers_linking():
    heap, _ = heap_with('lazy_binomial', range(1, 12))
    assert heap.num_trees() == 11
    assert heap.total_links() == 0
    heap.delete_min()
    heap.validate()
    # 10 = 8 + 2
    assert heap.num_trees() == 2
    assert heap.total_links() == 8


def test_swap_up_counts_heapify_cost():
    heap, items = heap_with('binomial', [1, 2, 3, 4])
    # one tree: 1 with children 2 and (3 with child 4)
    assert heap.num_trees() == 1
    heap.decrease_key(items[3], 4)
    heap.validate()
    assert heap.find_min() is items[3]
    assert heap.total_heapify_cost() == 2
    assert heap.total_cuts() == 0
    assert items[3]._node._parent is None


def test_cascading_cut_marks_and_cuts():
    heap, items = heap_with('fibonacci', range(1, 18))
    heap.delete_min()
    # one binomial tree of rank 4 rooted at 2
    assert heap.num_trees() == 1
    root = heap.find_min()._node
    deep = max(root.all_nodes(), key=lambda node: len(list(
        node.all_nodes())) if node is not root else 0)
    # deep is the child of rank 3 of the root
    assert deep._rank == 3
    grandchild = max(deep.children(), key=lambda node: node._rank)
    leaf = next(c for c in grandchild.children() if c._rank == 0)
    sibling = next(c for c in grandchild.children() if c is not leaf)
    heap.decrease_key(leaf.item(), leaf.item().key())
    heap.validate()
    assert heap.total_cuts() == 1
    assert heap.num_marked_nodes() == 1
    assert grandchild._mark
    heap.decrease_key(sibling.item(), sibling.item().key())
    heap.validate()
    # grandchild is cut too and its parent gets marked
    assert heap.total_cuts() == 3
    assert not grandchild._mark
    assert grandchild._parent is None
    assert deep._mark
    assert heap.num_marked_nodes() == 1
    assert heap.total_heapify_cost() == 0


def test_binomial_with_cuts_links_after_cut():
    heap, items = heap_with('binomial_with_cuts', range(1, 9))
    assert heap.num_trees() == 1
    assert heap.total_links() == 7
    # 8 is a child of 7, which is a child of 5, which is a child of 1
    heap.decrease_key(items[7], 100)
    heap.validate()
    assert heap.find_min() is items[7]
    assert heap.total_cuts() == 1
    assert heap.num_trees() == 2
    assert heap.num_marked_nodes() == 1
    heap.decrease_key(items[6], 100)
    heap.validate()
    # 7 is cut and linked with 8, then 5 gets marked
    assert heap.find_min() is items[6]
    assert heap.total_cuts() == 2
    assert heap.total_links() == 8
    assert heap.num_trees() == 2
    assert heap.num_marked_nodes() == 1
    assert items[4]._node._mark


@pytest.mark.parametrize('n', [1, 2, 10, 100])
def test_sorting(variant, n):
    binomial_heaps.test_sorting_insert(variant, n)
    binomial_heaps.test_sorting_meld(variant, n)
    binomial_heaps.test_sorting_decreasekey(variant, n)
    binomial_heaps.test_sorting_sample(variant, n)


def test_random_operations(variant):
    binomial_heaps.test_random_operations(variant, 1500)


def test_counters_never_decrease(variant):
    heap = Heap.variant(variant)
    items = []
    last = (0, 0, 0)
    for step in range(600):
        p = random.random()
        if p < 0.5 or not items:
            items.append(heap.insert(random.randint(1, 1000)))
        elif p < 0.7:
            heap.decrease_key(random.choice(items), random.randint(1, 50))
        elif p < 0.85:
            heap.delete(random.choice(items))
        elif p < 0.95:
            heap.delete_min()
        else:
            other = Heap.variant(variant)
            other.insert(random.randint(1, 1000))
            heap.meld(other)
        counters = (heap.total_links(), heap.total_cuts(),
                    heap.total_heapify_cost())
        assert all(now >= before for now, before in zip(counters, last))
        last = counters
        items = [item for item in items if not item.deleted()]
    heap.validate()


def test_all_items_after_cuts(variant):
    heap, items = heap_with(variant, range(1, 65))
    heap.delete_min()
    for item in items[40:]:
        heap.decrease_key(item, random.randint(1, 60))
    heap.delete(items[10])
    heap.validate()
    live = [item for item in items if not item.deleted()]
    found = list(heap.all_items())
    assert len(found) == heap.size() == len(live)
    assert set(found) == set(live)
    assert {item.value() for item in found} == {item.value() for item in live}


def test_latex(tmp_path):
    heap = binomial_heaps.random_heap(20)
    filename = tmp_path / 'heap.tex'
    heap.latex(str(filename), show_keys=True)
    txt = filename.read_text()
    assert r'\begin{forest}' in txt
    assert txt.count(r'\NODE{') == heap.size()


def test_experiments(capsys):
    averages = heap_experiments.main(['200', '2'])
    assert set(averages) == {(e, v) for e in heap_experiments.EXPERIMENTS
                             for v in VARIANTS}
    for variant in VARIANTS:
        assert averages[1, variant]['size'] == 199
        assert averages[2, variant]['size'] == heap_experiments.REMAINING
        assert averages[3, variant]['size'] == 199 - 1
    assert averages[1, 'binomial']['cuts'] == 0
    assert averages[3, 'fibonacci']['heapify'] == 0
    assert averages[3, 'binomial']['heapify'] > 0
    assert 'Experiment 3' in capsys.readouterr().out


def test_permutation_is_reproducible():
    keys = heap_experiments.permutation(50, 7)
    assert sorted(keys) == list(range(1, 51))
    assert keys == heap_experiments.permutation(50, 7)
