"""
Bucket Search Exceptions

This module defines the errors raised by the bucket search engine.
"""


class BucketSearchError(Exception):
    """Base class for all bucket search errors."""


class InvalidStateError(BucketSearchError, ValueError):
    """Raised when a bucket is built with an impossible capacity or quantity."""


class EmptyCollectionError(BucketSearchError, ValueError):
    """Raised when a path selection is asked to choose from no paths at all."""
