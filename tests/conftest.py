"""
Shared fixtures for the bucket search tests.
"""

import pytest


@pytest.fixture
def caps():
    return (4, 3)
