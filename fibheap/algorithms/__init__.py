from fibheap.algorithms.shortest_paths import *
from fibheap.algorithms.mst import *
