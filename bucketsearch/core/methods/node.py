#!/usr/bin/env python3
"""
Bucket Search Node Module

A node holds a pair of buckets (A, B) together with a reference to the node
that generated it, so that search algorithms can backtrack.

The identity of a node is the pair of quantities in buckets A and B. Bucket
capacities are ignored, so the following nodes are equal:

    Node(Bucket(5, 4), Bucket(4, 2)) == Node(Bucket(7, 4), Bucket(2, 2))
"""

from bucketsearch.core.methods.bucket import Bucket


class Node:
    def __init__(self, a, b, parent=None):
        """
        Builds a node from a pair of buckets and an optional parent node.

        :param a: Bucket A.
        :param b: Bucket B.
        :param parent: The node this one was generated from, or None for a root.
        """
        self.a = a
        self.b = b
        self.set_parent(parent)

    @classmethod
    def from_state(cls, capacities, quantities, parent=None):
        """
        Builds a node from (capacity A, capacity B) and (quantity A, quantity B).
        """
        cap_a, cap_b = capacities
        qty_a, qty_b = quantities
        return cls(Bucket(cap_a, qty_a), Bucket(cap_b, qty_b), parent)

    def set_parent(self, parent):
        """Assigns the parent of this node and recomputes its depth."""
        self.depth = parent.depth + 1 if parent is not None else 0
        self.parent = parent

    @property
    def state(self):
        """The (quantity A, quantity B) pair identifying this node."""
        return (self.a.quantity, self.b.quantity)

    def breed(self):
        """
        Generates the six children reachable with one bucket operation.

        Every child gets its own copy of both buckets and this node as parent.
        The order is fixed: fill A, fill B, empty A, empty B, pour A into B,
        pour B into A. Children equal to this node are kept.

        :return: A list of six Node objects.
        """
        children = [Node(self.a.copy(), self.b.copy(), self) for _ in range(6)]

        children[0].a.fill()
        children[1].b.fill()
        children[2].a.empty()
        children[3].b.empty()
        children[4].a.pour_to(children[4].b)
        children[5].b.pour_to(children[5].a)

        return children

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Node):
            return NotImplemented
        return self.state == other.state

    def __hash__(self):
        return hash(self.state)

    def __str__(self):
        return f"({self.a.quantity}, {self.b.quantity})"

    def __repr__(self):
        return f"Node({self.a!r}, {self.b!r}, depth={self.depth})"
