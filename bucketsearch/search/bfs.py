# bucketsearch/search/bfs.py
# Breadth-First Search over bucket states

from bucketsearch.core.logging import BucketSearchLogger
from bucketsearch.search.base import SearchAlgorithm

logger = BucketSearchLogger.get_logger('search.bfs')


class BreadthFirst(SearchAlgorithm):
    """
    Breadth-First Search implementation.
    - Expands nodes in the order they were discovered (non-decreasing depth)
    - Never discovers the same state twice
    - Rebuilds the path by following parent links back to the root

    Discovered nodes are kept in a list; each entry remembers the index of
    its parent in that list.
    """

    name = 'BFS'

    def __init__(self):
        super().__init__()
        self.discovered = []
        self.parents = []
        self.index = 0
        self._positions = {}

    def _reset(self, root):
        self.discovered.clear()
        self.parents.clear()
        self._positions.clear()
        self.index = 0
        self.nodes_expanded = 0
        self._discover(root, None)

    def _discover(self, node, parent_index):
        self._positions[node.state] = len(self.discovered)
        self.discovered.append(node)
        self.parents.append(parent_index)

    def execute(self, root, target):
        """
        Searches level by level from root until target is found or every
        reachable state has been discovered.

        Args:
            root: The starting Node
            target: The Node to reach

        Returns:
            list: The shortest path from root to target, or None
        """
        self._reset(root)
        logger.info(f"BFS search from {root} to {target}")

        # The index slides through the discovered list until the target
        # is found or the end of the list is reached
        while self.index < len(self.discovered):
            current_index = self.index
            current = self.discovered[current_index]
            self.index += 1
            self.nodes_expanded += 1

            if current == target:
                path = self._build_path(current_index)
                logger.info(f"BFS reached {target} in {len(path)} states "
                            f"({self.nodes_expanded} nodes expanded)")
                return path

            logger.debug(f"BFS expanding {current} at depth {current.depth}")
            for child in current.breed():
                if child.state not in self._positions:
                    self._discover(child, current_index)

        logger.info(f"BFS exhausted {len(self.discovered)} states without reaching {target}")
        return None

    def _build_path(self, index):
        # Backtracking through parent indices
        path = []
        while index is not None:
            path.append(self.discovered[index])
            index = self.parents[index]

        path.reverse()
        return path
