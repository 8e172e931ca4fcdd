#!/usr/bin/env python3
"""
Bucket Search Logging Module

This module provides centralized logging functionality for the bucket search project.
It configures logging with a console handler and, when a log directory is
configured, a rotating file handler.
"""

import logging
import logging.handlers
from datetime import datetime

from bucketsearch.config.config import config

class BucketSearchLogger:
    """
    Centralized logging class for the bucket search project.

    This class configures logging once for the whole package, allowing for
    consistent logging across the search algorithms and the command line.
    """

    # Class variable to track if logger has been initialized
    _initialized = False

    @classmethod
    def setup_logging(cls, log_level=None, log_file=None):
        """
        Set up logging configuration for the entire package.

        Args:
            log_level (int): Logging level (default: level from config)
            log_file (str): Path to log file (default: None, a dated file in the
                            configured log directory if there is one)

        Returns:
            logging.Logger: Configured logger instance
        """
        if cls._initialized:
            return logging.getLogger('bucketsearch')

        settings = config.logging
        if log_level is None:
            log_level = settings['level']

        if log_file is None and settings['log_dir'] is not None:
            logs_dir = settings['log_dir']
            logs_dir.mkdir(exist_ok=True, parents=True)

            # Create log file with timestamp
            timestamp = datetime.now().strftime('%Y%m%d')
            log_file = logs_dir / f"{settings['file_prefix']}_{timestamp}.log"

        logger = logging.getLogger('bucketsearch')
        logger.setLevel(log_level)

        # Remove existing handlers if any
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        formatter = logging.Formatter(settings['format'])

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file is not None:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file, maxBytes=settings['max_bytes'], backupCount=settings['backup_count'])
            file_handler.setLevel(logging.DEBUG)  # File gets everything
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        # Mark as initialized
        cls._initialized = True

        logger.debug("Logging system initialized")
        return logger

    @classmethod
    def set_level(cls, log_level):
        """
        Change the level of the package logger and its console handler.

        Args:
            log_level (int): New logging level
        """
        logger = cls.get_logger()
        logger.setLevel(log_level)
        for handler in logger.handlers:
            if not isinstance(handler, logging.handlers.RotatingFileHandler):
                handler.setLevel(log_level)

    @classmethod
    def get_logger(cls, name=None):
        """
        Get a logger instance for the specified module.

        Args:
            name (str): Name of the module requesting the logger
                        (default: None, returns the package logger)

        Returns:
            logging.Logger: Logger instance
        """
        if not cls._initialized:
            cls.setup_logging()

        if name:
            return logging.getLogger(f'bucketsearch.{name}')
        return logging.getLogger('bucketsearch')

# Initialize the default logger
logger = BucketSearchLogger.setup_logging()
