#!/usr/bin/env python3
"""
Bucket Search Configuration Module

This module provides the configuration settings for the bucket search engine.
It includes the search parameters, console output settings and logging options.
"""

import os
import logging
from pathlib import Path

class BucketSearchConfig:
    """
    Configuration class for the bucket search engine.

    This class provides centralized configuration for:
    - Available search methods and defaults
    - Console output of found paths
    - Logging level and optional log file location
    """

    def __init__(self):
        # Base directories
        self.project_root = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

        # Initialize configurations
        self._init_search_params()
        self._init_display_params()
        self._init_logging_params()

    def _init_search_params(self):
        """
        Initialize search parameters.
        """
        self.search = {
            'algorithms': ['BFS', 'AS'],
            'method_names': {
                'BFS': 'Breadth First Search',
                'AS': 'A* (best known path)'
            },
            'default_method': 'BFS',
            'default_capacities': (4, 3)
        }

    def _init_display_params(self):
        """
        Initialize console output parameters.
        """
        self.display = {
            'not_found_message': 'The target has not been reached',
            'length_label': 'Path length',
            'table_title': 'Path',
            'border_style': 'green',
            'state_style': 'cyan'
        }

    def _init_logging_params(self):
        """
        Initialize logging parameters.

        File logging is only enabled when BUCKETSEARCH_LOG_DIR is set.
        """
        level_name = os.environ.get('BUCKETSEARCH_LOG_LEVEL', 'INFO').upper()
        log_dir = os.environ.get('BUCKETSEARCH_LOG_DIR')

        self.logging = {
            'level': getattr(logging, level_name, logging.INFO),
            'log_dir': Path(log_dir) if log_dir else None,
            'file_prefix': 'bucketsearch',
            'max_bytes': 10 * 1024 * 1024,  # 10 MB per log file
            'backup_count': 5,
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }

# Create a singleton instance
config = BucketSearchConfig()
