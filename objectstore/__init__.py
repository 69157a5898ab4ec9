# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Object store directories.

Presents a flat object store bucket as a tree of directories: create,
look up, list and recursively delete directories, and read and write
objects with string tags.
"""
from .client import (
    ConfigurationError,
    Container,
    InvalidEntryError,
    LocalContainer,
    MemoryContainer,
    NotFoundError,
    ObjectStoreError,
    Session,
    StorageError,
)
from .directory import Bucket, Directory

__version__ = "0.1.0"

__all__ = [
    "Bucket",
    "Directory",
    "Container",
    "LocalContainer",
    "MemoryContainer",
    "Session",
    "ObjectStoreError",
    "InvalidEntryError",
    "NotFoundError",
    "StorageError",
    "ConfigurationError",
]
