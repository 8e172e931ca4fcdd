"""
Bucket Search

Path search over the states of two water buckets, with a breadth first
search and a best known path ("A*") search.
"""

from .core.exceptions import BucketSearchError, InvalidStateError, EmptyCollectionError
from .core.methods import Bucket, Node, remove_cycles, append, find_shortest
from .search import SearchAlgorithm, BreadthFirst, BestFirst, AStar
from .path_finder import BucketPathFinder

__version__ = '1.0.0'

__all__ = [
    'BucketSearchError',
    'InvalidStateError',
    'EmptyCollectionError',
    'Bucket',
    'Node',
    'remove_cycles',
    'append',
    'find_shortest',
    'SearchAlgorithm',
    'BreadthFirst',
    'BestFirst',
    'AStar',
    'BucketPathFinder'
]
