#!/usr/bin/env python3
"""
Search Algorithm Base Class

This module defines the interface shared by every path search algorithm.
"""

from abc import ABC, abstractmethod


class SearchAlgorithm(ABC):
    """
    Abstract base class for path search algorithms.

    An instance can be reused for as many searches as needed. Its working
    storage is reset at the start of every call to execute(), so one instance
    must not run two searches at the same time.

    Attributes:
        name (str): Short method code used to select the algorithm
        nodes_expanded (int): Nodes taken from the frontier during the last search
    """

    name = None

    def __init__(self):
        self.nodes_expanded = 0

    @abstractmethod
    def execute(self, root, target):
        """
        Performs a path search.

        Args:
            root: The starting Node
            target: The Node to reach; only its state is compared

        Returns:
            list: The nodes from root to target inclusive, or None if the
                  target was not reached
        """
        raise NotImplementedError
