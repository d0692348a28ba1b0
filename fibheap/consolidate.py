"""
Consolidation of the root list after a minimum is deleted.
"""

import logging

from fibheap.node import concatenate, find_min, remove

__all__ = ["Consolidator"]

logger = logging.getLogger(__name__)


class Consolidator:
    """Merges the trees of a root list until all roots have distinct ranks.

    This is where the delayed work of a Fibonacci heap happens [1]_. The
    consolidator keeps a map from rank to the one root seen so far with that
    rank. When a second root of the same rank shows up, the root with the
    larger key becomes a child of the other and the merged tree, one rank
    higher, is checked against the map again.

    Parameters
    ----------
    trees : int
        The number of trees in the root list before consolidation.

    Attributes
    ----------
    trees : int
        The number of trees left after `consolidate`.
    rank : int
        The largest rank seen among the roots.
    min_node : Node or None
        A root with the minimum key after `consolidate`.

    References
    ----------
    .. [1] Thomas H. Cormen, Charles E. Leiserson, Ronald L. Rivest, and
       Clifford Stein. 2009. Introduction to Algorithms, Third Edition.
       The MIT Press., pp.513-517.
    """

    def __init__(self, trees):
        self.trees = trees
        self.rank = 0
        self.ranks = {}
        self.min_node = None

    def consolidate(self, start):
        """Consolidate the root list that contains `start`.

        Every root is visited once, walking right from `start`. Roots linked
        under another root during the walk have always been visited already.

        Parameters
        ----------
        start : Node
            A root, usually the provisional minimum.

        Returns
        -------
        min_node : Node
            A root with the minimum key. Ties go to the first root found when
            walking right from the last root that was placed.
        """
        roots = list(start.siblings())

        node = start
        for root in roots:
            node = root
            while True:
                other = self.ranks.pop(node.rank, None)
                if other is None:
                    break
                # The root already in the map wins ties.
                if other.key <= node.key:
                    node = self.merge(other, node)
                else:
                    node = self.merge(node, other)
            self.ranks[node.rank] = node
            if node.rank > self.rank:
                self.rank = node.rank

        self.min_node = find_min(node)
        logger.debug(
            "consolidated %d roots into %d trees, max rank %d",
            len(roots),
            self.trees,
            self.rank,
        )
        return self.min_node

    def merge(self, lesser, greater):
        """Make the root `greater` a child of the root `lesser`.

        Returns
        -------
        lesser : Node
            The root of the merged tree.
        """
        logger.debug(
            "linking %r under %r at rank %d", greater.key, lesser.key, lesser.rank
        )
        self.trees -= 1

        remove(greater)
        if lesser.child is None:
            greater.parent = lesser
            lesser.child = greater
        else:
            concatenate(lesser.child, greater)
        lesser.rank += 1

        return lesser
