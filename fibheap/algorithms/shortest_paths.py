"""
Shortest path algorithms for weighted graphs, driven by a Fibonacci heap.
"""

from fibheap.exception import NodeNotFound
from fibheap.heaps import FibonacciHeap

__all__ = ["dijkstra", "dijkstra_path_length"]


def _weight_function(G, weight):
    """Returns a function that returns the weight of an edge.

    Parameters
    ----------
    G : NetworkX graph.

    weight : string or function
        If it is callable, `weight` itself is returned. If it is a string,
        it is assumed to be the name of the edge attribute that represents
        the weight of an edge. Edges without the attribute weigh 1.

    Returns
    -------
    function
        A function taking the two endpoints of an edge and its data
        dictionary, and returning the weight of the edge. For multigraphs,
        the smallest weight among parallel edges is returned.
    """
    if callable(weight):
        return weight
    if G.is_multigraph():
        return lambda u, v, d: min(attr.get(weight, 1) for attr in d.values())
    return lambda u, v, data: data.get(weight, 1)


def dijkstra(G, source, weight="weight"):
    """Find shortest weighted paths and lengths from a source node.

    Every reached node has one entry in a Fibonacci heap, and relaxing an
    edge decreases the key of that entry in place instead of pushing a
    duplicate.

    Parameters
    ----------
    G : NetworkX graph

    source : node label
        Starting node for paths.

    weight : string or function
        If this is a string, then edge weights will be accessed via the
        edge attribute with this key (that is, the weight of the edge
        joining `u` to `v` will be ``G.edges[u, v][weight]``). If no
        such edge attribute exists, the weight of the edge is assumed to
        be one.

        If this is a function, the weight of an edge is the value
        returned by the function. The function must accept exactly three
        positional arguments: the two endpoints of an edge and the
        dictionary of edge attributes for that edge.

    Returns
    -------
    distance, path : pair of dictionaries
        Keyed by reachable nodes, `distance` holds the length of the
        shortest path from `source` and `path` holds the path itself as a
        list of nodes.

    Raises
    ------
    NodeNotFound
        If `source` is not in `G`.
    ValueError
        If a negative edge weight is found.

    Examples
    --------
    >>> import networkx as nx
    >>> G = nx.path_graph(5)
    >>> distance, path = dijkstra(G, 0)
    >>> distance[4]
    4
    >>> path[4]
    [0, 1, 2, 3, 4]
    """
    if source not in G:
        raise NodeNotFound(f"Node {source} not found in graph")

    weight = _weight_function(G, weight)
    heap = FibonacciHeap()
    handles = {source: heap.insert(0, source)}
    paths = {source: [source]}
    dist = {}

    while heap:
        d, u = heap.delete_min()
        dist[u] = d
        for v, e in G.adj[u].items():
            if v in dist:
                continue
            cost = weight(u, v, e)
            if cost is None:
                continue
            if cost < 0:
                raise ValueError("Contradictory paths found: negative weights?")
            vu_dist = d + cost
            handle = handles.get(v)
            if handle is None:
                handles[v] = heap.insert(vu_dist, v)
            elif vu_dist < handle.key:
                heap.decrease_key(handle, vu_dist)
            else:
                continue
            paths[v] = paths[u] + [v]

    return dist, paths


def dijkstra_path_length(G, source, target, weight="weight"):
    """Returns the shortest weighted path length in G from source to target.

    Raises
    ------
    NodeNotFound
        If `source` is not in `G`, or if `target` cannot be reached.
    """
    dist, _ = dijkstra(G, source, weight=weight)
    try:
        return dist[target]
    except KeyError as e:
        raise NodeNotFound(f"Node {target} not reachable from {source}") from e
