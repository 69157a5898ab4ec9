# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
In-memory container.

Keeps every item in a dictionary guarded by a lock. Useful for tests and
for short-lived scratch buckets that do not need to outlive the process.
"""
import bisect
import hashlib
from datetime import datetime, timezone
from io import BytesIO
from threading import RLock
from typing import Any, BinaryIO, Dict

from .container import Container, Item, ItemPage, read_exactly
from .exceptions import NotFoundError, StorageError
from .types import ItemInfo, ListItemsOptions
from ..utils import logger

class MemoryItem(Item):
    """Snapshot of an item held by a MemoryContainer."""

    def __init__(self, info: ItemInfo, data: bytes):
        self.info = info
        self._data = data

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def size(self) -> int:
        return self.info.size

    def open(self) -> BinaryIO:
        return BytesIO(self._data)

    def metadata(self) -> Dict[str, Any]:
        return dict(self.info.user_metadata)

class MemoryContainer(Container):
    """
    A Container backed by a dictionary.

    Attributes:
        objects (dict): Maps each key to its MemoryItem
        keys (list): Sorted list of stored keys, used for prefix enumeration
    """

    def __init__(self, name: str = "memory"):
        self._name = name
        self.lock = RLock()
        self.objects: Dict[str, MemoryItem] = {}
        self.keys = []

    @property
    def name(self) -> str:
        return self._name

    def item(self, key: str) -> Item:
        with self.lock:
            found = self.objects.get(key)
        if found is None:
            raise NotFoundError(f"item {key} not found in {self._name}", key=key, operation="HEAD")
        return found

    def items(self, options: ListItemsOptions) -> ItemPage:
        prefix = options.prefix or ""
        with self.lock:
            start = bisect.bisect_right(self.keys, options.cursor) if options.cursor else \
                bisect.bisect_left(self.keys, prefix)
            matched = []
            for key in self.keys[start:]:
                if not key.startswith(prefix):
                    if key > prefix:
                        break
                    continue
                if options.max_keys and len(matched) == options.max_keys:
                    return ItemPage(items=matched, cursor=matched[-1].name)
                matched.append(self.objects[key])
        return ItemPage(items=matched, cursor="")

    def put(self, key: str, reader: BinaryIO, size: int, metadata: Dict[str, Any]) -> Item:
        if not key:
            raise StorageError("empty key", key=key, operation="PUT")
        data = read_exactly(reader, size, key)
        info = ItemInfo(
            name=key,
            size=len(data),
            last_modified=datetime.now(timezone.utc),
            etag=hashlib.md5(data).hexdigest(),
            user_metadata=dict(metadata or {}),
        )
        stored = MemoryItem(info, data)
        with self.lock:
            if key not in self.objects:
                bisect.insort(self.keys, key)
            self.objects[key] = stored
        logger.debug(f"Stored {key} ({len(data)} bytes) in memory container {self._name}")
        return stored

    def remove_item(self, key: str) -> None:
        with self.lock:
            if key not in self.objects:
                raise NotFoundError(f"item {key} not found in {self._name}", key=key, operation="DELETE")
            del self.objects[key]
            self.keys.pop(bisect.bisect_left(self.keys, key))
        logger.debug(f"Removed {key} from memory container {self._name}")
