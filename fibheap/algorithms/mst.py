"""
Minimum spanning trees, built with Prim's algorithm on a Fibonacci heap.
"""

import networkx as nx

from fibheap.algorithms.shortest_paths import _weight_function
from fibheap.exception import FibonacciHeapException
from fibheap.heaps import FibonacciHeap

__all__ = ["prim_mst", "prim_mst_edges"]


def prim_mst_edges(G, weight="weight"):
    """Iterate over the edges of a minimum spanning forest of `G`.

    Each tree of the forest grows from one start node. Every node outside
    the tree that touches it has one entry in a Fibonacci heap, keyed by the
    lightest edge joining it to the tree; finding a lighter edge decreases
    that key in place.

    Parameters
    ----------
    G : undirected NetworkX graph

    weight : string or function
        Edge data key to use for weight (default 'weight'), or a function
        taking the two endpoints and the edge data dictionary. Edges
        without the attribute weigh 1.

    Yields
    ------
    u, v, w : tuple
        An edge of the forest and its weight, with `u` already in the tree
        when `v` joins it.

    Raises
    ------
    FibonacciHeapException
        If `G` is directed.
    """
    if G.is_directed():
        raise FibonacciHeapException(
            "Minimum spanning tree not defined for directed graphs."
        )

    weight = _weight_function(G, weight)
    visited = set()

    for start in G:
        if start in visited:
            continue

        heap = FibonacciHeap()
        handles = {start: heap.insert(0, start)}
        parent = {start: None}

        while heap:
            w, u = heap.delete_min()
            visited.add(u)
            if parent[u] is not None:
                yield parent[u], u, w

            for v, e in G.adj[u].items():
                if v in visited:
                    continue
                cost = weight(u, v, e)
                if cost is None:
                    continue
                handle = handles.get(v)
                if handle is None:
                    handles[v] = heap.insert(cost, v)
                elif cost < handle.key:
                    heap.decrease_key(handle, cost)
                else:
                    continue
                parent[v] = u


def prim_mst(G, weight="weight"):
    """Returns a minimum spanning forest of an undirected graph.

    Parameters
    ----------
    G : undirected NetworkX graph

    weight : string or function
        Edge data key to use for weight (default 'weight'), or a function
        taking the two endpoints and the edge data dictionary. Edges
        without the attribute weigh 1.

    Returns
    -------
    T : NetworkX Graph
        A minimum spanning forest of `G`, holding every node of `G` with its
        data. Each edge carries its weight under the key `weight`.

    Examples
    --------
    >>> import networkx as nx
    >>> G = nx.cycle_graph(4)
    >>> G.add_edge(0, 3, weight=2)
    >>> T = prim_mst(G)
    >>> sorted(T.edges(data=True))
    [(0, 1, {'weight': 1}), (1, 2, {'weight': 1}), (2, 3, {'weight': 1})]
    """
    T = nx.Graph()
    T.graph.update(G.graph)
    T.add_nodes_from(G.nodes(data=True))
    attr = weight if isinstance(weight, str) else "weight"
    T.add_weighted_edges_from(prim_mst_edges(G, weight=weight), weight=attr)
    return T
