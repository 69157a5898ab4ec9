# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Hierarchical directories emulated on top of a flat object store.
"""
from .bucket import Bucket
from .directory import Directory, sanitize_tags
from .paths import SEPARATOR, absolute, absolute_directory, storage_key
from .walker import PAGE_SIZE, EntryKind, classify, is_directory_object, iter_items, walk

__all__ = [
    "Bucket",
    "Directory",
    "EntryKind",
    "PAGE_SIZE",
    "SEPARATOR",
    "absolute",
    "absolute_directory",
    "classify",
    "is_directory_object",
    "iter_items",
    "sanitize_tags",
    "storage_key",
    "walk",
]
