# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Backing container clients for the object store.

Exposes the Container interface, its providers and the error types raised
at the backing store boundary.
"""
from .container import Container, Item, ItemPage
from .exceptions import (
    ConfigurationError,
    InvalidEntryError,
    NotFoundError,
    ObjectStoreError,
    OutputError,
    StorageError,
)
from .local import LocalContainer
from .memory import MemoryContainer
from .session import Session, create_container
from .types import ItemInfo, ListItemsOptions

__all__ = [
    "Container",
    "Item",
    "ItemPage",
    "ItemInfo",
    "ListItemsOptions",
    "LocalContainer",
    "MemoryContainer",
    "Session",
    "create_container",
    "ObjectStoreError",
    "InvalidEntryError",
    "NotFoundError",
    "StorageError",
    "ConfigurationError",
    "OutputError",
]
