# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Prefix walks over a container.

A container only offers flat, paginated enumeration of the keys sharing a
prefix. This module drives that enumeration to exhaustion and classifies
each enumerated key relative to the directory it was listed from.
"""
import enum
from typing import Callable, Iterator, Optional, Tuple

from ..client.container import Container, Item
from ..client.types import ListItemsOptions
from ..utils import logger
from .paths import SEPARATOR

# Keys requested from the container per enumeration call
PAGE_SIZE = 10000

class EntryKind(enum.Enum):
    SELF = "self"
    OBJECT = "object"
    DIRECTORY = "directory"
    DESCENDANT = "descendant"

def iter_items(container: Container, prefix: str, page_size: int = PAGE_SIZE) -> Iterator[Item]:
    """
    Lazily yield every item whose key starts with prefix.

    Pages are fetched on demand, page_size keys at a time, until the
    container reports exhaustion. Errors raised by the container stop the
    walk and propagate to the caller. The generator is single pass; a new
    call always starts from the beginning of the prefix range.

    Args:
        container (Container): Container to enumerate
        prefix (str): Key prefix, already stripped of its leading separator
        page_size (int): Maximum keys requested per call

    Yields:
        Item: Each matching item, in the order the container returns them
    """
    cursor = ""
    pages = 0
    while True:
        page = container.items(ListItemsOptions(prefix=prefix, cursor=cursor, max_keys=page_size))
        pages += 1
        logger.debug(f"walk page {pages} for prefix '{prefix}' returned {len(page.items)} items")
        yield from page.items
        if not page.cursor:
            return
        cursor = page.cursor

def walk(container: Container, prefix: str, page_size: int, fn: Callable[[Item], None]) -> int:
    """
    Call fn on every item whose key starts with prefix.

    An exception raised by fn stops the walk and propagates.

    Returns:
        int: Number of items visited
    """
    count = 0
    for item in iter_items(container, prefix, page_size):
        fn(item)
        count += 1
    return count

def is_directory_object(path: str) -> Optional[str]:
    """
    Check whether path names an immediate child directory.

    path is a key with the listing prefix already removed. It names an
    immediate child directory when it holds exactly one separator, e.g.
    "dir1/" or "dir1/file". "dir1/dir2/file" holds two and is a deeper
    descendant.

    Returns:
        str: The part before the separator, or None if path does not name
        an immediate child directory
    """
    parts = path.split(SEPARATOR, 2)
    if len(parts) == 2:
        return parts[0]
    return None

def classify(remainder: str) -> Tuple[EntryKind, str]:
    """
    Classify a key relative to the directory it was listed from.

    Args:
        remainder (str): Enumerated key with the directory prefix removed

    Returns:
        Tuple[EntryKind, str]: The kind of entry and the name it contributes
        to the listing: the object name for OBJECT, the first path segment
        for DIRECTORY and DESCENDANT, and "" for SELF
    """
    if remainder == "":
        return EntryKind.SELF, ""
    if SEPARATOR not in remainder:
        return EntryKind.OBJECT, remainder
    name = is_directory_object(remainder)
    if name is not None:
        return EntryKind.DIRECTORY, name
    return EntryKind.DESCENDANT, remainder.split(SEPARATOR, 1)[0]
