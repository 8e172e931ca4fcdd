"""
Bucket Search Configuration Package
"""

from .config import BucketSearchConfig, config

__all__ = ['BucketSearchConfig', 'config']
