"""
Heap nodes and the circular sibling lists that hold them.

Every level of a Fibonacci heap forest is a circular doubly linked list of
nodes: the root list, and below each node the ring of its children. The
functions here are the only places that rewire those rings.
"""

import weakref

from fibheap.exception import StaleHandleError

__all__ = ["Node", "Handle", "concatenate", "remove", "find_min"]


class Node:
    """An element of a Fibonacci heap.

    A node keeps a reference to its left and right siblings, to its parent
    while it is a child, and to one of its children. The siblings form a
    circular doubly linked list; a node on its own is a ring of one.
    """

    __slots__ = (
        "key",
        "value",
        "rank",
        "marked",
        "left",
        "right",
        "parent",
        "child",
        "removed",
        "__weakref__",
    )

    def __init__(self, key, value=None):
        self.key = key
        self.value = value
        # Number of direct children.
        self.rank: int = 0
        # Lost a child since it last became a child itself.
        self.marked: bool = False
        self.left = self
        self.right = self
        self.parent = None
        self.child = None
        self.removed = False

    def __repr__(self):
        return repr((self.key, self.value))

    def siblings(self):
        """Iterator over this node and all of its siblings.

        Starts at this node and walks right until it comes back around. The
        ring must not be rewired while the iterator is in use.

        Yields
        ------
        Node
            This node first, then every sibling exactly once.
        """
        yield self

        node = self.right
        while node is not self:
            yield node
            node = node.right

    def dissolve(self):
        """Drop every link of a node that has left its heap."""
        self.left = None
        self.right = None
        self.parent = None
        self.child = None
        self.removed = True


class Handle:
    """A weak reference to an element inserted into a heap.

    Handles are returned by `FibonacciHeap.insert` and are used to target
    `decrease_key` and `delete`. A handle stops resolving as soon as its
    element leaves the heap.
    """

    __slots__ = ("_ref",)

    def __init__(self, node):
        self._ref = weakref.ref(node)

    def resolve(self):
        """Returns the node this handle refers to.

        Returns
        -------
        node : Node or None
            The node, or None if the element is no longer in a heap.
        """
        node = self._ref()
        if node is None or node.removed:
            return None
        return node

    @property
    def key(self):
        return self._live().key

    @property
    def value(self):
        return self._live().value

    def _live(self):
        node = self.resolve()
        if node is None:
            raise StaleHandleError("handle refers to a removed element.")
        return node

    def __bool__(self):
        return self.resolve() is not None

    def __repr__(self):
        node = self.resolve()
        if node is None:
            return "<Handle (removed)>"
        return f"<Handle {node!r}>"


def concatenate(a, b):
    """Splice the ring of `b` into the ring of `a`, right after `a`.

    If `b` was the designated child of its parent, the parent loses its
    child reference since the whole ring of `b` leaves it. Every node of the
    ring of `b` takes the parent of `a` as its parent, which makes them roots
    when `a` is a root.

    Parameters
    ----------
    a : Node
        Any node of the receiving ring.
    b : Node
        Any node of the ring to splice in.
    """
    old_parent = b.parent
    new_parent = a.parent
    if old_parent is not None and old_parent.child is b:
        old_parent.child = None
    if old_parent is not new_parent:
        for node in b.siblings():
            node.parent = new_parent

    a_right = a.right
    b_left = b.left
    a.right = b
    b.left = a
    b_left.right = a_right
    a_right.left = b_left


def remove(node):
    """Splice `node` out of its ring and return it as a ring of one.

    If `node` was the designated child of its parent, the parent's child
    becomes the former left neighbour of `node`, or None if `node` was an
    only child. The parent's rank is left to the caller.
    """
    left = node.left
    right = node.right
    parent = node.parent
    if parent is not None and parent.child is node:
        parent.child = left if left is not node else None

    left.right = right
    right.left = left
    node.left = node
    node.right = node
    return node


def find_min(node):
    """Returns the node with the smallest key in the ring of `node`.

    Ties go to the node seen first when walking right from `node`.
    """
    min_node = node
    for sibling in node.siblings():
        if sibling.key < min_node.key:
            min_node = sibling
    return min_node
