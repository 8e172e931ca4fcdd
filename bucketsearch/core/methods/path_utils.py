#!/usr/bin/env python3
"""
Bucket Search Path Utilities

Helper functions shared by the search algorithms. A path is an ordered
sequence of nodes from the root to the current frontier node; the root alone
is a path of length 1.
"""

from bucketsearch.core.exceptions import EmptyCollectionError


def remove_cycles(candidates, excluded):
    """
    Removes the candidates whose state is already present in `excluded`.

    Args:
        candidates: Sequence of nodes, usually the output of Node.breed()
        excluded: Path or visited collection of nodes to avoid

    Returns:
        list: The surviving candidates, in their original order
    """
    seen = {node.state for node in excluded}
    return [node for node in candidates if node.state not in seen]


def append(path, node):
    """
    Returns a new path with `node` appended; the given path is left untouched.
    """
    return tuple(path) + (node,)


def find_shortest(paths):
    """
    Finds the shortest path in a collection of paths.

    Ties go to the path encountered first.

    Args:
        paths: Non-empty iterable of paths

    Returns:
        The first path of minimal length

    Raises:
        EmptyCollectionError: If `paths` is empty
    """
    shortest = None
    for path in paths:
        if shortest is None or len(path) < len(shortest):
            shortest = path

    if shortest is None:
        raise EmptyCollectionError("Cannot select the shortest path from an empty collection")
    return shortest


def path_states(path):
    """Returns the (quantity A, quantity B) tuples along a path."""
    return [node.state for node in path]
