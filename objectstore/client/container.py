# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Container Module.

This module defines the minimal surface a backing store must offer to the
directory layer: a flat container of items addressed by string keys, with
prefix enumeration, single-item reads, writes and removals.

Classes:
    Item: A handle to one stored item.
    ItemPage: One page of a prefix enumeration.
    Container: A bucket of items.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, List

from .exceptions import StorageError
from .types import ListItemsOptions

class Item(ABC):
    """A handle to a single stored item."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Key of the item within its container."""

    @property
    @abstractmethod
    def size(self) -> int:
        """Size of the item content in bytes."""

    @abstractmethod
    def open(self) -> BinaryIO:
        """
        Open the item content for reading.

        The caller owns the returned stream and must close it.

        Raises:
            StorageError: If the content cannot be opened.
        """

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """
        Return the user metadata stored with the item.

        Raises:
            StorageError: If the metadata cannot be fetched.
        """

@dataclass
class ItemPage:
    """One page of items returned by Container.items."""
    items: List[Item] = field(default_factory=list)
    cursor: str = ""

class Container(ABC):
    """
    A flat bucket of items.

    Implementations must be safe to share between many Directory instances.
    Thread safety across concurrent callers is up to the implementation.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the bucket this container wraps."""

    @abstractmethod
    def item(self, key: str) -> Item:
        """
        Look up the item stored at key.

        Raises:
            NotFoundError: If no item exists at key.
            StorageError: If the lookup itself fails.
        """

    @abstractmethod
    def items(self, options: ListItemsOptions) -> ItemPage:
        """
        Enumerate one page of items whose keys start with options.prefix.

        Items are returned in ascending key order, starting after
        options.cursor. An empty cursor in the returned page means the
        enumeration is exhausted.

        Raises:
            StorageError: If the enumeration fails.
        """

    @abstractmethod
    def put(self, key: str, reader: BinaryIO, size: int, metadata: Dict[str, Any]) -> Item:
        """
        Write exactly size bytes from reader at key, replacing any existing item.

        Raises:
            StorageError: If the write fails or reader holds fewer than size bytes.
        """

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """
        Remove the item stored at key.

        Raises:
            NotFoundError: If the provider reports the key missing.
            StorageError: If the removal fails.
        """

def read_exactly(reader: BinaryIO, size: int, key: str) -> bytes:
    """
    Read exactly size bytes from reader.

    Args:
        reader (BinaryIO): Source stream
        size (int): Number of bytes to consume
        key (str): Key being written, for error context

    Returns:
        bytes: The data read

    Raises:
        StorageError: If the stream ends before size bytes were read
    """
    if size < 0:
        raise StorageError(f"invalid size {size} for {key}", key=key, operation="PUT")
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = reader.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    if remaining:
        raise StorageError(f"short read for {key}: expected {size} bytes, got {size - remaining}",
                           key=key, operation="PUT")
    return b"".join(chunks)
