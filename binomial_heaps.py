'''
    Binomial heaps, lazy binomial heaps, Fibonacci heaps and binomial
    heaps with cuts, implemented as one pointer based meldable heap.

    The variant is chosen by two flags when the heap is created.
    lazy_melds postpones successive linking of the roots until the next
    delete_min, otherwise roots are linked after every meld and cut.
    lazy_decrease_keys handles a decrease key by cutting the node and
    cascading cuts to marked ancestors, otherwise the item is swapped
    towards the root until heap order is restored.

    The heap counts links, cuts and item swaps, so that the amortized
    cost of the four variants can be compared (see heap_experiments.py).
    Heap.validate() checks the structural integrity of the data
    structure using assertions.
'''


import math
import random


# (lazy_melds, lazy_decrease_keys) of the named heap variants
VARIANTS = {
    'binomial':           (False, False),
    'lazy_binomial':      (True,  False),
    'fibonacci':          (True,  True),
    'binomial_with_cuts': (False, True),
}


class Heap:
    '''Meldable heap of items with integer keys.

    The class supports the following operations:

      - Heap(lazy_melds, lazy_decrease_keys) creates and returns an empty
        heap. Heap.variant(name) does the same for a name in VARIANTS.
      - H.empty() returns if the heap H is empty.
      - H.find_min() returns the item in H with minimum key, or None.
      - H.insert(key, value) creates in heap H an item x with (key, value)
        and returns x.
      - H.delete_min() deletes the item with minimum key from the heap H.
      - H.decrease_key(x, diff) decreases the key of item x by diff.
      - H.delete(x) deletes the item x from the heap H.
      - H1.meld(H2) moves all items of H2 into H1 and leaves H2 empty.

    x.item() returns the pair (key, value) stored in item x.

    The heap is a forest of heap ordered trees. The roots form a cyclic
    doubly linked list, as do the children of each node. Items are
    handles separate from the nodes, so that items can be swapped
    between nodes without invalidating the handles.

    The counters total_links(), total_cuts() and total_heapify_cost()
    never decrease. A meld adds the counters of the consumed heap.
    '''

    def __init__(self, lazy_melds=False, lazy_decrease_keys=False):
        '''Initialize a new empty heap.'''

        self._lazy_melds = lazy_melds
        self._lazy_decrease_keys = lazy_decrease_keys
        if lazy_decrease_keys:
            self._restore_order = self.cascading_cut
        else:
            self._restore_order = self.swap_up
        self._min = None
        self._size = 0
        self._num_trees = 0
        self._marked_nodes = 0
        self._links = 0
        self._cuts = 0
        self._heapify_cost = 0

    @classmethod
    def variant(cls, name):
        '''Create an empty heap of the named variant, see VARIANTS.'''

        lazy_melds, lazy_decrease_keys = VARIANTS[name]
        return cls(lazy_melds, lazy_decrease_keys)

    def policy(self):
        '''Return the pair (lazy_melds, lazy_decrease_keys).'''

        return (self._lazy_melds, self._lazy_decrease_keys)

    def empty(self):
        '''Return if heap is empty.'''

        return self._size == 0

    def find_min(self):
        '''Return the item with smallest key. None if the heap is empty.'''

        return self._min

    def insert(self, key, value=''):
        '''Insert new (key, value) item into heap. Returns the item.'''

        assert isinstance(key, int) and not isinstance(key, bool)

        item = Item(key, value)
        Node(item)
        single = Heap(self._lazy_melds, self._lazy_decrease_keys)
        single._min = item
        single._size = 1
        single._num_trees = 1
        self.meld(single)
        return item

    def delete_min(self):
        '''Delete the item with minimum key. Nothing happens if empty.'''

        if self._min is None:
            return

        node = self._min._node

        assert node._parent is None

        # Children become roots, they are not counted as cuts
        first_child = node._child
        for child in node.children():
            child._parent = None
            if child._mark:
                child._mark = False
                self._marked_nodes -= 1
        # Replace node in root list by its children
        if node._next is node:
            start = first_child
        else:
            left = node._prev
            right = node._next
            if first_child is None:
                left._next = right
                right._prev = left
            else:
                last_child = first_child._prev
                left._next = first_child
                first_child._prev = left
                last_child._next = right
                right._prev = last_child
            start = right
        self._size -= 1
        node._child = None
        node._rank = 0
        node._next = node
        node._prev = node
        node.retire()
        if self._size > 0:
            self.successive_linking(start)
        else:
            assert start is None
            self._min = None
            self._num_trees = 0

    def decrease_key(self, item, diff):
        '''Decrease the key of item by diff.

        Keys are allowed to become zero or negative. Nothing happens if
        diff is not positive or the item has been deleted.
        '''

        if item is None or item.deleted() or diff <= 0:
            return

        assert self._min is not None
        assert item._node._item is item

        item._key -= diff
        self._restore_order(item)
        if item._key < self._min._key:
            self._min = item

    def delete(self, item):
        '''Delete the item from this heap. Ignores deleted items.'''

        if item is None or item.deleted() or self._min is None:
            return

        if item is not self._min:
            # Make item the unique minimum
            self.decrease_key(item, item._key - self._min._key + 1)

        assert self._min is item

        self.delete_min()

    def meld(self, other):
        '''Move all items of other into this heap. Other becomes empty.'''

        assert other is not self
        assert other.policy() == self.policy()

        self._links += other._links
        self._cuts += other._cuts
        self._heapify_cost += other._heapify_cost
        if self._min is None:
            self._min = other._min
            self._size = other._size
            self._num_trees = other._num_trees
            self._marked_nodes = other._marked_nodes
        elif other._min is not None:
            self._size += other._size
            self._num_trees += other._num_trees
            self._marked_nodes += other._marked_nodes
            # Concatenate the two cyclic root lists
            head = self._min._node
            tail = head._prev
            other_head = other._min._node
            other_tail = other_head._prev
            tail._next = other_head
            other_head._prev = tail
            other_tail._next = head
            head._prev = other_tail
            if self._lazy_melds:
                if other._min._key < self._min._key:
                    self._min = other._min
            else:
                self.successive_linking(head)
        other.retire()

    def retire(self):
        '''Reset to the empty heap, including the counters.'''

        self._min = None
        self._size = 0
        self._num_trees = 0
        self._marked_nodes = 0
        self._links = 0
        self._cuts = 0
        self._heapify_cost = 0

    ##################################################################
    #                           Counters
    ##################################################################

    def size(self):
        '''Return the number of items in the heap.'''

        return self._size

    def num_trees(self):
        '''Return the number of trees (roots) in the heap.'''

        return self._num_trees

    def num_marked_nodes(self):
        '''Return the number of marked nodes in the heap.'''

        return self._marked_nodes

    def total_links(self):
        '''Return the total number of links performed.'''

        return self._links

    def total_cuts(self):
        '''Return the total number of cuts performed.'''

        return self._cuts

    def total_heapify_cost(self):
        '''Return the total number of item swaps made by swap_up.'''

        return self._heapify_cost

    ##################################################################
    #                     Linking and cutting
    ##################################################################

    def roots(self):
        '''Generator to yield all roots of the heap.'''

        if self._min is not None:
            yield from self._min._node.siblings()

    def link(self, y, x):
        '''Make root y the rightmost child of root x (key of x <= key of y).'''

        assert x is not y
        assert x._parent is None
        assert y._parent is None
        assert y._next is y and y._prev is y
        assert not y < x

        y._parent = x
        if x._child is None:
            x._child = y
        else:
            y.insert_after(x._child._prev)
        x._rank += 1
        y._mark = False
        self._links += 1

    def add_root(self, node):
        '''Add a single tree to the root list.'''

        assert node._parent is None
        assert node._next is node and node._prev is node

        if self._min is None:
            self._min = node._item
            self._num_trees = 1
            return
        node.insert_after(self._min._node._prev)
        self._num_trees += 1
        if node < self._min._node:
            self._min = node._item

    def cut(self, node):
        '''Cut node from its parent and make it a root of this heap.'''

        node.cut()
        if node._mark:
            node._mark = False
            self._marked_nodes -= 1
        self._cuts += 1
        self.add_root(node)
        if not self._lazy_melds:
            self.successive_linking(self._min._node)

    def successive_linking(self, start):
        '''Link roots of equal rank until all roots have distinct ranks.

        start can be any node in the root list. The roots are placed in
        buckets by rank, and two roots in the same bucket are linked and
        moved to the next bucket. The root list is rebuilt from the
        buckets by increasing rank, and the minimum and the number of
        trees are recomputed.
        '''

        roots = list(start.siblings())
        buckets = [None] * (2 * int(math.log2(max(self._size, 1))) + 10)
        for x in roots:
            x._next = x
            x._prev = x
            while True:
                if x._rank >= len(buckets):
                    buckets.extend([None] * (x._rank + 1 - len(buckets)))
                y = buckets[x._rank]
                if y is None:
                    break
                buckets[x._rank] = None
                if y < x:  # on equal keys x stays the parent
                    x, y = y, x
                self.link(y, x)
            buckets[x._rank] = x

        self._min = None
        self._num_trees = 0
        last = None
        for x in buckets:
            if x is None:
                continue
            if last is not None:
                x.insert_after(last)
            last = x
            self._num_trees += 1
            if self._min is None or x < self._min._node:
                self._min = x._item

    ##################################################################
    #                     Restoring heap order
    ##################################################################

    def swap_up(self, item):
        '''Swap item with its parent's item until heap order is restored.'''

        node = item._node
        while node._parent is not None and node < node._parent:
            node.swap_items(node._parent)
            self._heapify_cost += 1
            node = item._node

    def cascading_cut(self, item):
        '''Cut item's node if it is smaller than its parent.

        A non-root ancestor losing a child gets marked, if it was marked
        already it is cut too and the next ancestor is considered.
        '''

        node = item._node
        parent = node._parent
        if parent is None or not node < parent:
            return
        parent_was_root = parent._parent is None
        self.cut(node)
        while not parent_was_root:
            if not parent._mark:
                parent._mark = True
                self._marked_nodes += 1
                return
            node = parent
            parent = node._parent
            parent_was_root = parent._parent is None
            self.cut(node)

    ##################################################################
    #                      Validation methods
    ##################################################################

    def validate(self):
        '''Validate all heap structure and invariants.'''

        heap = self

        assert heap._size >= 0
        assert heap._links >= 0
        assert heap._cuts >= 0
        assert heap._heapify_cost >= 0

        if heap._min is None:
            assert heap._size == 0
            assert heap._num_trees == 0
            assert heap._marked_nodes == 0
            return

        assert heap._min._node is not None
        assert heap._min._node._item is heap._min

        seen = set()
        size = 0
        marked = 0
        root_ranks = []
        for root in heap.roots():
            assert root._parent is None
            assert not root._mark
            assert not root < heap._min._node  # min is smallest root
            root_ranks.append(root._rank)
            stack = [root]
            while stack:
                node = stack.pop()
                # Each node reached once
                assert id(node) not in seen
                seen.add(id(node))
                size += 1
                if node._mark:
                    marked += 1
                # Item and node point to each other
                assert node._item is not None
                assert node._item._node is node
                # Validate sibling pointers (cyclic linked list)
                assert node is node._next._prev
                assert node is node._prev._next
                # Validate heap order
                if node._parent is not None:
                    assert not node < node._parent
                children = list(node.children())
                assert node._rank == len(children)
                for child in children:
                    assert child._parent is node
                    stack.append(child)
                if not heap._lazy_decrease_keys:
                    # Without cuts all trees are binomial trees
                    ranks = sorted(child._rank for child in children)
                    assert ranks == list(range(node._rank))
        assert size == heap._size
        assert len(root_ranks) == heap._num_trees
        assert marked == heap._marked_nodes
        if not heap._lazy_melds:
            assert len(set(root_ranks)) == len(root_ranks)
        if heap._lazy_decrease_keys:
            assert heap._heapify_cost == 0
        else:
            assert heap._cuts == 0
            assert heap._marked_nodes == 0

    def all_items(self):
        '''Generator to yield all items in the heap.'''

        stack = list(self.roots())
        while stack:
            node = stack.pop()
            yield node._item
            stack.extend(node.children())

    ##################################################################
    #                        Save heap as LaTeX
    ##################################################################

    def latex(self, filename='heap_figure.tex', show_keys=False):
        '''Save heap as a LaTeX figure using the forest package.

        Each node shows its rank, marked nodes are drawn filled. The
        trees hang below an invisible root in the order of the root list.
        '''

        heap = self

        assert heap._min is not None

        def traverse(node, indent=0):
            '''Convert subtree rooted at node to Latex with indentation.'''

            key = str(node._item._key) if show_keys else ''
            txt = r'\NODE{' + str(node._rank) + r'}{' + key + '}'
            txt += ', marked' if node._mark else ', unmarked'
            if node._child is None:
                txt = ' ' * indent + '[ ' + txt + ' ]\n'
            else:
                txt = ' ' * indent + '[ ' + txt + '\n'
                for child in node.children():
                    txt += traverse(child, indent + 2)
                txt += ' ' * indent + ']\n'
            return txt

        trees = ''.join(traverse(root, 4) for root in heap.roots())
        txt = r'''\documentclass[margin=15pt]{standalone}
\usepackage{forest}
\begin{document}
\forestset{forest circles/.style={
    for tree={math content, draw, circle,
      inner sep=0pt, outer sep=0cm, anchor=center,
      l=25pt, s sep=20pt, minimum size=16pt, font=\scriptsize},
    marked/.style={fill=black!15},
    unmarked/.style={}
  }
}
\newcommand{\NODE}[2]{\makebox[0cm][c]{#1}\rlap{\hspace{1.5em}\tiny #2}}
\begin{forest}
  forest circles,
  [ , phantom, for children={no edge}
''' + trees + r'''  ]
\end{forest}
\end{document}
'''
        with open(filename, 'w') as file:
            print(txt, file=file)


######################################################################
#                        Item and node records
######################################################################


class Item:
    '''A handle to an item (key, value) stored in a heap.'''

    def __init__(self, key, value):
        '''Create an item not yet stored in a node.'''

        self._key = key
        self._value = value
        self._node = None

    def item(self):
        '''Return the item (key, value).'''

        return (self._key, self._value)

    def key(self):
        '''Return the current key of the item.'''

        return self._key

    def value(self):
        '''Return the value stored with the item.'''

        return self._value

    def deleted(self):
        '''Return if the item has been deleted from its heap.'''

        return self._node is None

    def __repr__(self):
        state = ' deleted' if self.deleted() else ''
        return f'<Item key={self._key!r} value={self._value!r}{state}>'


class Node:
    '''A node in a tree of the heap, storing one item.'''

    def __init__(self, item):
        '''Create a single node tree storing item.'''

        assert item._node is None

        self._item = item
        item._node = self
        # tree structure
        self._parent = None
        self._child = None  # any child
        self._next = self  # no sibling
        self._prev = self  # no sibling
        # state
        self._rank = 0
        self._mark = False

    def retire(self):
        '''Detach this single node from its item.'''

        assert not self.retired()
        assert self._parent is None
        assert self._child is None
        assert self._next is self._prev is self

        self._item._node = None
        self._item = None

    def retired(self):
        '''Return if this node has been retired.'''

        return self._item is None

    def item(self):
        '''Return the item stored in node.'''

        assert not self.retired()

        return self._item

    def __lt__(self, other):
        '''Compare nodes by the keys of their items.'''

        return self._item._key < other._item._key

    def siblings(self):
        '''Generator to yield the nodes of the cyclic list from this node.'''

        node = self
        yield node
        while node._next is not self:
            node = node._next
            yield node

    def children(self):
        '''Generator to return all children of node.'''

        if self._child is not None:
            yield from self._child.siblings()

    def all_nodes(self):
        '''Generator to yield all nodes in subtree rooted at node.'''

        yield self
        for child in self.children():
            yield from child.all_nodes()

    def height(self):
        '''Return height of subtree rooted at node.'''

        return 1 + max((child.height() for child in self.children()), default=0)

    def insert_after(self, prev):
        '''Insert this single node in the cyclic list after prev.'''

        assert self is self._next
        assert self is self._prev

        self._prev = prev
        self._next = prev._next
        self._next._prev = self
        self._prev._next = self

    def unlink(self):
        '''Unlink this node from its cyclic list.'''

        self._prev._next = self._next
        self._next._prev = self._prev
        self._prev = self
        self._next = self

    def cut(self):
        '''Remove this node from the children of its parent.'''

        parent = self._parent
        if parent is None:
            return  # already a root
        if parent._child is self:
            if self._next is not self:
                parent._child = self._next
            else:
                parent._child = None
        self.unlink()
        parent._rank -= 1
        self._parent = None

    def swap_items(self, other):
        '''Exchange the items stored in this node and other node.'''

        self._item, other._item = other._item, self._item
        self._item._node = self
        other._item._node = other


######################################################################
#                          Test methods
######################################################################


def swap(L, i, j):
    '''Swap entries L[i] and L[j].'''

    L[i], L[j] = L[j], L[i]


def pop_random(L):
    '''Remove a random element from L (by swapping with last element).'''

    swap(L, -1, random.randint(0, len(L) - 1))
    return L.pop()


def random_items(n, distinct_keys=False):
    '''Returns a list of n random (key, value) items (value='').'''

    if distinct_keys:
        return [(key, '') for key in random.sample(range(1, 3 * n), n)]
    else:
        return [(random.randint(1, n), '') for _ in range(n)]


def delete_all(heap):
    '''Create sorted list with all items from heap by calling n x delete_min.'''

    sorted_sequence = []
    while not heap.empty():
        item = heap.find_min()
        heap.validate()
        sorted_sequence.append(item.item())
        heap.delete_min()
        assert item.deleted()
        heap.validate()
    heap.validate()
    assert heap.find_min() is None
    return sorted_sequence


def test_sorting_insert(variant, n):
    '''Sort using n x insert and n x delete_min.'''

    items = random_items(n)
    heap = Heap.variant(variant)
    heap.validate()
    # Create heap with n items
    for key, value in items:
        heap.insert(key, value)
        heap.validate()
    assert delete_all(heap) == sorted(items)


def test_sorting_meld(variant, n):
    '''Sort using (n - 1) x meld in random order and n x delete_min.'''

    items = random_items(n)
    heaps = []
    # Create n heaps with one item
    for key, value in items:
        heap = Heap.variant(variant)
        heap.validate()
        heap.insert(key, value)
        heap.validate()
        heaps.append(heap)
    # Repeatedly meld two random heaps until one heap remains
    while len(heaps) >= 2:
        heap1 = pop_random(heaps)
        heap2 = pop_random(heaps)
        size = heap1.size() + heap2.size()
        heap1.meld(heap2)
        heap1.validate()
        heap2.validate()
        assert heap1.size() == size
        assert heap2.empty()
        heaps.append(heap1)
    heap = heaps.pop()
    assert delete_all(heap) == sorted(items)


def test_sorting_decreasekey(variant, n):
    '''Sort using n x decrease_key and n x delete_min.'''

    items = random_items(n)
    heap = Heap.variant(variant)
    heap.validate()
    handles = []
    # Create heap with n + 1 items each with the same large key
    for _ in range(n + 1):
        handles.append(heap.insert(n + 1))
        heap.validate()
    heap.delete_min()  # link the single node trees
    heap.validate()
    handles = [item for item in handles if not item.deleted()]
    # Decrease keys to the items real value
    random.shuffle(handles)
    for item, (key, value) in zip(handles, items):
        heap.decrease_key(item, n + 1 - key)
        heap.validate()
    assert delete_all(heap) == sorted(items)


def test_sorting_sample(variant, n, delete_probability=0.5):
    '''Sort n items with a sample removed using delete.'''

    items = random_items(n)
    heap = Heap.variant(variant)
    heap.validate()
    handles = []
    # Create heap with n items
    for key, value in items:
        item = heap.insert(key, value)
        heap.validate()
        handles.append((item, (key, value)))
    random.shuffle(handles)
    # Remove sample
    items = []  # not deleted items
    for item, pair in handles:
        if random.random() < delete_probability:
            heap.delete(item)
            assert item.deleted()
            heap.validate()
        else:
            items.append(pair)
    assert delete_all(heap) == sorted(items)


def test_examples(variant):
    '''Small deterministic sequences with known results.'''

    heap = Heap.variant(variant)
    assert heap.find_min() is None
    heap.delete_min()  # no-op on empty heap
    heap.validate()
    a = heap.insert(10, 'a')
    b = heap.insert(3, 'b')
    c = heap.insert(7, 'c')
    heap.validate()
    assert heap.find_min() is b
    heap.delete_min()
    heap.validate()
    assert b.deleted()
    assert heap.find_min().key() == 7
    heap.decrease_key(a, 9)
    heap.validate()
    assert heap.find_min() is a
    assert a.item() == (1, 'a')
    heap.delete(c)
    heap.validate()
    assert heap.size() == 1
    heap.decrease_key(c, 1)  # deleted items are ignored
    heap.delete(c)
    heap.validate()
    assert heap.size() == 1

    heap = Heap.variant(variant)
    big = heap.insert(2 ** 31 - 1, 'big')
    heap.insert(2, 'small')
    heap.delete(big)
    heap.validate()
    assert heap.find_min().item() == (2, 'small')
    assert big.deleted()


def test_sorting(n, repeats):
    '''Run all sorting tests on all heap variants.'''

    print('Sorting n =', n, end=' ', flush=True)
    for _ in range(1, repeats + 1):
        print('.', end='', flush=True)
        for variant in VARIANTS:
            test_sorting_insert(variant, n)
            test_sorting_meld(variant, n)
            test_sorting_decreasekey(variant, n)
            test_sorting_sample(variant, n)
    print()


def test_random_operations(variant, n):
    '''Test a random sequence of n heap operations.

    Every heap is paired with a dictionary mapping each of its items to
    the key the item should have.
    '''

    print(n, 'random', variant, 'heap operations ', end='', flush=True)
    heaps = []
    for iteration in range(1, n + 1):
        if iteration % 100 == 0:
            print('.', end='', flush=True)
        p = random.random()
        if len(heaps) == 0 or p < 0.05:  # new heap
            heap = Heap.variant(variant)
            heaps.append((heap, {}))
            heap.validate()
        elif p < 0.1:  # meld
            if len(heaps) >= 2:
                heap1, S1 = pop_random(heaps)
                heap2, S2 = pop_random(heaps)
                links = heap1.total_links() + heap2.total_links()
                counters = (heap1.total_cuts() + heap2.total_cuts(),
                            heap1.total_heapify_cost() +
                            heap2.total_heapify_cost())
                heap1.meld(heap2)
                assert counters == (heap1.total_cuts(),
                                    heap1.total_heapify_cost())
                lazy_melds, _ = heap1.policy()
                if lazy_melds:
                    assert heap1.total_links() == links
                else:  # successive linking after the meld
                    assert heap1.total_links() >= links
                assert heap2.empty() and heap2.find_min() is None
                S1.update(S2)
                heaps.append((heap1, S1))
                heap1.validate()
        elif p < 0.4:  # decrease_key
            heap, S = random.choice(heaps)
            if not heap.empty():
                item = random.choice(list(S))
                diff = random.randint(1, 25)
                heap.decrease_key(item, diff)
                S[item] -= diff
                heap.validate()
        elif p < 0.5:  # delete
            heap, S = random.choice(heaps)
            if not heap.empty():
                item = random.choice(list(S))
                heap.delete(item)
                del S[item]
                heap.validate()
        elif p < 0.8:  # insert
            heap, S = random.choice(heaps)
            key = random.randint(1, 100)
            item = heap.insert(key, iteration)
            S[item] = key
            heap.validate()
        else:  # delete_min
            heap, S = random.choice(heaps)
            links, cuts = heap.total_links(), heap.total_cuts()
            if heap.empty():
                heap.delete_min()
            else:
                item = heap.find_min()
                assert item.key() == min(S.values())
                del S[item]
                heap.delete_min()
            assert heap.total_links() >= links
            assert heap.total_cuts() == cuts  # children are not cut
            heap.validate()
        # Validate content of the heaps
        for heap, S in heaps:
            assert heap.size() == len(S)
            assert {item: item.key() for item in heap.all_items()} == S
            if not heap.empty():
                assert heap.find_min().key() == min(S.values())
    print(' final heap sizes:', *sorted(heap.size() for heap, S in heaps))


######################################################################
#         Generation of figure illustrating a typical heap
######################################################################


def random_heap(size, variant='fibonacci'):
    '''Create a random heap using insert, delete_min and decrease_key.'''

    heap = Heap.variant(variant)
    for key, value in random_items(size + 1, distinct_keys=True):
        heap.insert(key, value)
    heap.delete_min()
    for _ in range(size // 3):
        item = random.choice(list(heap.all_items()))
        new_key = random.randint(1, item.key())
        keys = {item.key() for item in heap.all_items()}
        if new_key not in keys:
            heap.decrease_key(item, item.key() - new_key)

    return heap


def generate_figure(tex_file='heap-figure.tex'):
    '''Create latex document with figure showing a Fibonacci heap.

    The generated heap satisfies the following requirements:

      - The heap has at least 4 trees.
      - The height is at most 5.
      - At least two nodes are marked.
      - At least one marked node has children.
    '''

    print('Trying to create an illustrative heap ', end='', flush=True)
    while True:
        heap = random_heap(30)
        roots = list(heap.roots())
        nodes = [node for root in roots for node in root.all_nodes()]

        if (len(roots) < 4
          or max(root.height() for root in roots) > 5
          or heap.num_marked_nodes() < 2
          or not any(node._mark and node._child for node in nodes)
        ):
            print('.', end='', flush=True)
            continue
        break
    print(' saving', tex_file)
    heap.latex(tex_file, show_keys=True)


######################################################################
#                               Main
######################################################################


if __name__ == '__main__':
    for variant in VARIANTS:
        test_examples(variant)
    test_sorting(1, 10)
    test_sorting(10, 100)
    test_sorting(100, 10)
    for variant in VARIANTS:
        test_random_operations(variant, 10000)
    generate_figure()
