# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Utility functions for the object store.

This module provides logging configuration and utility functions
shared by the backing containers and the directory layer.
"""

import logging
import time
import os

# Enable a debug trace for all directory operations if requested
TRACE_OPERATIONS = os.environ.get('OBJECTSTORE_TRACE_OPS', '').lower() in ('true', '1', 'yes')

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s'

logger = logging.getLogger('ObjectStore')
logger.setLevel(os.environ.get('OBJECTSTORE_LOG_LEVEL', 'WARNING').upper())

def configure_logging(level=logging.INFO):
    """
    Configure root logging with the object store format.

    Intended for applications and examples; the library itself never
    configures the root logger.

    Args:
        level (int): Level applied to both the root logger and the ObjectStore logger
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)

def time_function(func_name, start_time):
    """
    Helper function for timing operations.

    Calculates and logs the elapsed time for a function call.

    Args:
        func_name (str): Name of the function being timed
        start_time (float): Start time from time.time()

    Returns:
        float: Elapsed time in seconds
    """
    elapsed = time.time() - start_time
    logger.info(f"{func_name} completed in {elapsed:.4f} seconds")
    return elapsed

def trace_op(operation, path, **details):
    """
    Trace a directory operation for debugging purposes.

    This function logs detailed information about directory operations
    when the OBJECTSTORE_TRACE_OPS environment variable is set.

    Args:
        operation (str): The operation being performed
        path (str): The path the operation acts on
        **details: Additional details to log
    """
    if TRACE_OPERATIONS:
        detail_str = ', '.join(f"{k}={v}" for k, v in details.items())
        logger.debug(f"TRACE: {operation} on {path} {detail_str}")
