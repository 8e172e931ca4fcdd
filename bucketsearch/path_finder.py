# bucketsearch/path_finder.py
# Interface for finding bucket paths using the search algorithms

from bucketsearch.config.config import config
from bucketsearch.core.logging import BucketSearchLogger
from bucketsearch.core.methods.node import Node
from bucketsearch.core.methods.path_utils import path_states
from bucketsearch.search import ALGORITHMS

logger = BucketSearchLogger.get_logger('path_finder')


class BucketPathFinder:
    def __init__(self, capacities=None, methods=None):
        """
        Initializes the BucketPathFinder for a pair of bucket capacities.

        Args:
            capacities: (capacity A, capacity B) (default: from config).
            methods: Method codes to make available (default: from config).
        """
        if capacities is None:
            capacities = config.search['default_capacities']
        if methods is None:
            methods = config.search['algorithms']

        self.capacities = tuple(capacities)
        self.algorithms = {}
        for method in methods:
            if method not in ALGORITHMS:
                raise ValueError(f"Unknown search method: {method}")
            self.algorithms[method] = ALGORITHMS[method]()

    def build_node(self, quantities):
        """
        Builds a root node holding the given quantities in the configured buckets.

        Raises:
            InvalidStateError: If a quantity does not fit its bucket.
        """
        return Node.from_state(self.capacities, quantities)

    def state_space_size(self):
        """Number of distinct states for the configured capacities."""
        cap_a, cap_b = self.capacities
        return (cap_a + 1) * (cap_b + 1)

    def find_path(self, start, target, method=None):
        """
        Finds a path from start to target using the specified search method.

        Args:
            start: Start quantities (A, B) or a Node.
            target: Target quantities (A, B) or a Node.
            method: The search method to use (default: from config).
                    Options: "BFS", "AS"

        Returns:
            A list of nodes from start to target, or None if the target is unreachable.
        """
        if method is None:
            method = config.search['default_method']
        if method not in self.algorithms:
            raise ValueError(f"Unknown search method: {method}")

        root = start if isinstance(start, Node) else self.build_node(start)
        goal = target if isinstance(target, Node) else self.build_node(target)

        logger.debug(f"Searching {self.state_space_size()} possible states "
                     f"with capacities {self.capacities}")
        return self.algorithms[method].execute(root, goal)

    def compare_methods(self, start, target, methods=None):
        """
        Finds a path with each search method.

        Args:
            start: Start quantities (A, B) or a Node.
            target: Target quantities (A, B) or a Node.
            methods: List of search methods to use. If None, uses all available methods.

        Returns:
            dict: Method code -> path (or None)
        """
        if methods is None:
            methods = list(self.algorithms)

        return {method: self.find_path(start, target, method) for method in methods}

    def format_path_output(self, path, method):
        """
        Formats a search result for display.

        Args:
            path: A list of nodes, or None.
            method: The method code that produced the path.

        Returns:
            A dictionary with the formatted path information.
        """
        found = path is not None
        return {
            "found": found,
            "method": method,
            "method_name": config.search['method_names'].get(method, method),
            "length": len(path) if found else 0,
            "states": path_states(path) if found else [],
            "nodes_expanded": self.algorithms[method].nodes_expanded
        }
