"""
fibheap
=======

fibheap is a Python package providing a Fibonacci heap: a mergeable priority
queue with amortized O(1) insertion, union and key decrease, and amortized
O(log n) deletion of the minimum or of an arbitrary element.

It also ships shortest path and minimum spanning tree routines for networkx
graphs that are driven by the heap.
"""

__version__ = "0.1.0"

from fibheap.exception import *

from fibheap import node
from fibheap.node import Handle

from fibheap import consolidate
from fibheap import heaps
from fibheap.heaps import *

from fibheap import algorithms
from fibheap.algorithms import *
