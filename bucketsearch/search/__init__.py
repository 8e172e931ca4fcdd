# bucketsearch/search/__init__.py
# This file makes the search directory a Python package and provides convenient imports

from .base import SearchAlgorithm
from .bfs import BreadthFirst
from .astar import BestFirst, AStar

ALGORITHMS = {
    BreadthFirst.name: BreadthFirst,
    BestFirst.name: BestFirst
}

__all__ = ['SearchAlgorithm', 'BreadthFirst', 'BestFirst', 'AStar', 'ALGORITHMS']
