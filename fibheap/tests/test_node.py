import gc

import pytest

from fibheap import StaleHandleError
from fibheap.node import Handle, Node, concatenate, find_min, remove


def ring(*keys):
    nodes = [Node(k) for k in keys]
    for node in nodes[1:]:
        concatenate(nodes[0].left, node)
    return nodes


def keys(node):
    return [n.key for n in node.siblings()]


def test_singleton():
    node = Node(1, "a")
    assert node.left is node
    assert node.right is node
    assert node.parent is None
    assert node.child is None
    assert node.rank == 0
    assert not node.marked
    assert list(node.siblings()) == [node]
    assert repr(node) == "(1, 'a')"


def test_concatenate_splices_after():
    a, b = Node(1), Node(2)
    concatenate(a, b)
    assert keys(a) == [1, 2]
    assert a.left is b and a.right is b

    c = Node(3)
    concatenate(a, c)
    assert keys(a) == [1, 3, 2]
    for node in a.siblings():
        assert node.right.left is node
        assert node.left.right is node


def test_concatenate_rings():
    first = ring(1, 2, 3)
    second = ring(4, 5)
    concatenate(first[0], second[0])
    assert keys(first[0]) == [1, 4, 5, 2, 3]
    assert len(list(second[1].siblings())) == 5


def test_concatenate_reparents():
    parent = Node(0)
    child = Node(1)
    child.parent = parent
    parent.child = child
    parent.rank = 1

    others = ring(2, 3)
    concatenate(child, others[0])
    assert all(n.parent is parent for n in child.siblings())
    assert parent.child is child

    root = Node(-1)
    concatenate(root, parent.child)
    assert parent.child is None
    assert all(n.parent is None for n in root.siblings())


def test_remove():
    nodes = ring(1, 2, 3)
    removed = remove(nodes[1])
    assert removed is nodes[1]
    assert list(removed.siblings()) == [removed]
    assert keys(nodes[0]) == [1, 3]

    assert remove(nodes[0]) is nodes[0]
    assert list(nodes[2].siblings()) == [nodes[2]]


def test_remove_fixes_parent_child():
    parent = Node(0)
    children = ring(1, 2)
    for child in children:
        child.parent = parent
    parent.child = children[1]
    parent.rank = 2

    remove(children[1])
    assert parent.child is children[0]
    remove(children[0])
    assert parent.child is None


def test_find_min():
    nodes = ring(5, 3, 8, 3, 9)
    assert find_min(nodes[0]) is nodes[1]
    assert find_min(nodes[3]) is nodes[3]


class TestHandle:
    def test_resolve(self):
        node = Node(7, "x")
        handle = Handle(node)
        assert handle.resolve() is node
        assert handle
        assert handle.key == 7
        assert handle.value == "x"

    def test_dissolved(self):
        node = Node(7)
        handle = Handle(node)
        node.dissolve()
        assert handle.resolve() is None
        assert not handle
        assert repr(handle) == "<Handle (removed)>"
        with pytest.raises(StaleHandleError):
            handle.key
        with pytest.raises(LookupError):
            handle.value

    def test_collected(self):
        handle = Handle(Node(7))
        gc.collect()
        assert handle.resolve() is None
