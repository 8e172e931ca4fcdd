"""
Bucket Search Logging Package

This package provides centralized logging functionality for the bucket search project.
"""

from .logger import BucketSearchLogger, logger

__all__ = ['BucketSearchLogger', 'logger']
