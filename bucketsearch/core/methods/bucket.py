#!/usr/bin/env python3
"""
Bucket Search Bucket Module

This module defines the Bucket class, a single water bucket with a fixed
capacity and a current quantity. A pair of buckets forms one search state
(see node.py).
"""

from bucketsearch.core.exceptions import InvalidStateError


class Bucket:
    def __init__(self, capacity, quantity=0):
        """
        Creates a bucket holding a given quantity.

        :param capacity: Total capacity of the bucket, must be greater than zero.
        :param quantity: Units currently in the bucket, between 0 and capacity.
        :raises InvalidStateError: If capacity or quantity exceed their limits.
        """
        if capacity <= 0:
            raise InvalidStateError(f"Capacity should be greater than zero, got {capacity}")

        if quantity < 0 or quantity > capacity:
            raise InvalidStateError(
                f"Quantity {quantity} is outside the limits [0, {capacity}]")

        self.capacity = capacity
        self.quantity = quantity

    def fill(self):
        """Fills the bucket to its capacity."""
        self.quantity = self.capacity

    def empty(self):
        """Empties the bucket."""
        self.quantity = 0

    def pour_to(self, other):
        """
        Pours the contents of this bucket into another one until this bucket
        is empty or the other one is full.

        :param other: The receiving bucket.
        """
        transfer = min(self.quantity, other.capacity - other.quantity)
        self.quantity -= transfer
        other.quantity += transfer

    def copy(self):
        """Returns an independent bucket with the same capacity and quantity."""
        return Bucket(self.capacity, self.quantity)

    def __repr__(self):
        return f"Bucket(capacity={self.capacity}, quantity={self.quantity})"
