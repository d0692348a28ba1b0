"""
Fibonacci heaps.
"""

import logging

from fibheap.consolidate import Consolidator
from fibheap.exception import FibonacciHeapError, KeyIncreaseError, StaleHandleError
from fibheap.node import Handle, Node, concatenate, find_min, remove

__all__ = ["FibonacciHeap"]

logger = logging.getLogger(__name__)


class FibonacciHeap:
    """A Fibonacci heap.

    A FibonacciHeap stores key-value pairs ordered by their keys. Values are
    opaque and never compared. Inserting a pair returns a `Handle` that can
    later be used to decrease the key of the pair or to delete it.

    The heap only keeps a reference to its minimum node, which sits in the
    root list. Inserting, finding the minimum, merging two heaps and
    decreasing a key take O(1) amortized time; deleting the minimum or an
    arbitrary pair takes O(log n) amortized time [1]_.

    Attributes
    ----------
    n : int
        The number of pairs in the heap.
    rank : int
        The largest rank reported by the last consolidation.
    trees : int
        The number of trees in the root list.
    marks : int
        The number of marked nodes. Roots are never marked.

    Examples
    --------
    >>> heap = FibonacciHeap()
    >>> handle = heap.insert(20, "b")
    >>> _ = heap.insert(10, "a")
    >>> heap.decrease_key(handle, 5)
    >>> heap.delete_min()
    (5, 'b')

    References
    ----------
    .. [1] Thomas H. Cormen, Charles E. Leiserson, Ronald L. Rivest, and
       Clifford Stein. 2009. Introduction to Algorithms, Third Edition.
       The MIT Press., pp.505-526.
    """

    def __init__(self):
        """Initialize an empty fibonacci heap.
        """
        self.n: int = 0
        self.rank: int = 0
        self.trees: int = 0
        self.marks: int = 0
        self.min_node: Node = None

    def find_min(self):
        """Query the minimum key-value pair.

        Returns
        -------
        key, value : tuple or None
            The key-value pair with the minimum key in the heap, or None if
            the heap is empty.
        """
        if self.min_node is None:
            return None
        return (self.min_node.key, self.min_node.value)

    def insert(self, key, value=None):
        """Insert a new key-value pair.

        Parameters
        ----------
        key : object comparable with existing keys.
            The key.

        value : object
            The value. Default value: None.

        Returns
        -------
        handle : Handle
            A weak reference to the inserted pair.
        """
        node = Node(key, value)
        min_node = self.min_node

        if min_node is None:
            self.min_node = node
        else:
            concatenate(min_node, node)
            if key < min_node.key:
                self.min_node = node

        self.n += 1
        self.trees += 1
        return Handle(node)

    def delete_min(self):
        """Delete the minimum pair in the heap.

        Returns
        -------
        key, value : tuple or None
            The key-value pair with the minimum key in the heap, or None if
            the heap is empty.
        """
        min_node = self.min_node
        if min_node is None:
            return None

        self.n -= 1
        self.trees += min_node.rank - 1

        # The children of the minimum become roots. Roots are never marked.
        child = min_node.child
        if child is not None:
            for node in child.siblings():
                node.parent = None
                if node.marked:
                    node.marked = False
                    self.marks -= 1
            min_node.child = None

        left = min_node.left
        if left is min_node:
            left = None
        remove(min_node)
        key, value = min_node.key, min_node.value
        min_node.dissolve()

        if child is not None:
            if left is not None:
                concatenate(left, child)
            start = child
        else:
            start = left

        if start is None:
            self.min_node = None
            self.rank = 0
        else:
            consolidator = Consolidator(self.trees)
            self.min_node = consolidator.consolidate(find_min(start))
            self.trees = consolidator.trees
            self.rank = consolidator.rank

        return (key, value)

    def decrease_key(self, handle, key):
        """Decreases the key of the pair referred to by `handle` to `key`.

        Parameters
        ----------
        handle : Handle
            A handle returned by `insert` on this heap, or on a heap
            merged into it with `union`.
        key : object comparable with existing keys.
            The new key, which must be smaller than the current key.

        Raises
        ------
        StaleHandleError
            If the pair is no longer in the heap.
        KeyIncreaseError
            If `key` is not smaller than the current key.
        """
        node = self._resolve(handle)
        if not key < node.key:
            raise KeyIncreaseError(
                f"new key {key!r} is not smaller than the current key {node.key!r}."
            )
        node.key = key
        self._prune(node)

    def delete(self, handle):
        """Deletes the pair referred to by `handle`.

        This acts as decreasing the key to minus infinity and deleting the
        minimum: the pair is cut to the root list, made the minimum and
        deleted. Its key is never changed, so keys of any comparable type
        work. `handle` must have been issued by this heap or by a heap merged
        into it.

        Returns
        -------
        key, value : tuple
            The deleted key-value pair.

        Raises
        ------
        StaleHandleError
            If the pair is no longer in the heap.
        """
        node = self._resolve(handle)
        self._prune(node, force=True)
        # Another pair may share the minimum key.
        self.min_node = node
        return self.delete_min()

    def union(self, other: "FibonacciHeap"):
        """Moves all the pairs of `other` into this heap.

        Parameters
        ----------
        other : FibonacciHeap
            A Fibonacci heap whose pairs you want to add to this heap. The
            other heap is left empty. Handles issued by `other` stay valid
            and now refer to pairs in this heap.

        Raises
        ------
        FibonacciHeapError
            If `other` is this heap.
        """
        if other is self:
            raise FibonacciHeapError("cannot merge a heap with itself.")

        other_min = other.min_node
        if other_min is None:
            return

        min_node = self.min_node
        if min_node is None:
            self.min_node = other_min
        else:
            concatenate(min_node, other_min)
            if other_min.key < min_node.key:
                self.min_node = other_min

        self.n += other.n
        self.trees += other.trees
        self.marks += other.marks
        self.rank = max(self.rank, other.rank)

        other.n = 0
        other.rank = 0
        other.trees = 0
        other.marks = 0
        other.min_node = None

    def size(self):
        """Returns the number of key-value pairs in the heap.
        """
        return self.n

    def is_empty(self):
        """Returns whether the heap is empty.
        """
        return self.min_node is None

    def items(self):
        """Iterate over all key-value pairs in the heap, tree by tree.

        Yields
        ------
        key, value : tuple
            A key-value pair in the heap.
        """
        for _, node in self._walk():
            yield (node.key, node.value)

    def render(self):
        """Returns a drawing of the forest, one line per node.

        Each line holds a key, a star if the node is marked and a colon.
        Children are indented by two spaces below their parent.
        """
        lines = []
        for depth, node in self._walk():
            mark = "*" if node.marked else ""
            lines.append(f"{'  ' * depth}{node.key}{mark}:")
        return "\n".join(lines)

    def _walk(self):
        """Depth-first walk over the forest, yielding (depth, node) pairs."""
        if self.min_node is None:
            return

        stack = [(self.min_node.siblings(), 0)]
        while stack:
            siblings, depth = stack[-1]
            node = next(siblings, None)
            if node is None:
                stack.pop()
                continue
            yield depth, node
            if node.child is not None:
                stack.append((node.child.siblings(), depth + 1))

    def _resolve(self, handle):
        node = handle.resolve()
        if node is None:
            raise StaleHandleError("handle refers to a pair no longer in the heap.")
        return node

    def _prune(self, node: Node, force: bool = False):
        """Restore heap order after the key of `node` has decreased.

        A node that is now smaller than its parent is cut to the root list.
        Its parent is marked, or cut as well if it was already marked, and so
        on up the tree.

        Parameters
        ----------
        node : Node
            A node whose key has just been decreased.
        force : bool
            Cut `node` even if heap order still holds.
        """
        parent = node.parent
        if parent is None:
            if node.key < self.min_node.key:
                self.min_node = node
            return
        if not force and parent.key <= node.key:
            return

        while True:
            self._cut(node, parent)
            grandparent = parent.parent
            if grandparent is None:
                break
            if not parent.marked:
                parent.marked = True
                self.marks += 1
                break
            logger.debug("cascading cut reaches %r", parent.key)
            node, parent = parent, grandparent

    def _cut(self, node: Node, parent: Node):
        """Remove `node` from the child list of `parent` and add it to the
        root list.
        """
        logger.debug("cutting %r from %r", node.key, parent.key)
        if node.marked:
            node.marked = False
            self.marks -= 1

        remove(node)
        parent.rank -= 1
        concatenate(self.min_node, node)
        self.trees += 1

        if node.key < self.min_node.key:
            self.min_node = node

    def __contains__(self, handle):
        """Returns whether `handle` refers to a pair in this heap.
        """
        node = handle.resolve()
        if node is None or self.min_node is None:
            return False
        while node.parent is not None:
            node = node.parent
        return any(root is node for root in self.min_node.siblings())

    def __bool__(self):
        """Returns whether the heap is not empty.
        """
        return self.min_node is not None

    def __len__(self):
        """Returns the number of key-value pairs in the heap.
        """
        return self.n

    def __iter__(self):
        return self.items()

    def __str__(self):
        return self.render()
