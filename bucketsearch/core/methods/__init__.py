"""
Bucket Search Methods Package

This package provides the state model (buckets and nodes) and the path
helpers used by the search algorithms.
"""

from .bucket import Bucket
from .node import Node
from .path_utils import remove_cycles, append, find_shortest, path_states

__all__ = ['Bucket', 'Node', 'remove_cycles', 'append', 'find_shortest', 'path_states']
