# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Directories over a flat object store.

A Directory is a (bucket, path) pair. Its path starts with "/" and ends
with "/". The hierarchy exists only in key shapes: a zero-byte marker
object stored at the directory key makes an empty directory visible, and
listings are derived from prefix enumeration of the bucket.

Usage:
    bucket = Bucket(MemoryContainer("backups"))
    root = bucket.root()
    snapshots = root.create_directory("snapshots")
    snapshots.put_bytes("manifest.json", b"{}", {"kanister.io/phase": "backup"})
    data, tags = snapshots.get_bytes("manifest.json")
    snapshots.delete_directory()
"""
import time
from contextlib import closing
from io import BytesIO
from typing import TYPE_CHECKING, BinaryIO, Dict, List, Optional, Tuple

from ..client.exceptions import InvalidEntryError, NotFoundError, ObjectStoreError, StorageError
from ..utils import logger, time_function, trace_op
from . import paths
from .walker import EntryKind, classify, iter_items

if TYPE_CHECKING:
    from .bucket import Bucket

def sanitize_tags(tags: Optional[Dict[str, str]]) -> Dict[str, str]:
    """Replace separators in tag keys with "-"; some providers reject them."""
    return {key.replace(paths.SEPARATOR, "-"): value for key, value in (tags or {}).items()}

class Directory:
    """
    A directory in a bucket.

    Directories are immutable. Every operation that returns a Directory
    returns a new one bound to the same bucket.

    Attributes:
        bucket (Bucket): Bucket the directory belongs to, shared with every
            other directory derived from it
        path (str): Canonical directory path, or "" for an unbound directory
    """

    def __init__(self, bucket: "Bucket", path: str):
        if path and not paths.is_canonical_directory(path):
            raise InvalidEntryError(f"malformed directory path {path!r}")
        self.bucket = bucket
        self.path = path

    def __str__(self):
        """Return the string that Bucket.open_directory() accepts back."""
        return f"{self.bucket.host_endpoint}{self.path}"

    def __repr__(self):
        return f"Directory({self.bucket.container.name!r}, {self.path!r})"

    def __eq__(self, other):
        if not isinstance(other, Directory):
            return NotImplemented
        return self.bucket is other.bucket and self.path == other.path

    def __hash__(self):
        return hash((id(self.bucket), self.path))

    @property
    def container(self):
        return self.bucket.container

    def _check_entry(self, operation: str):
        if self.path == "":
            logger.warning(f"{operation} called on a directory without a path")
            raise InvalidEntryError(operation=operation)

    def _child(self, name: str) -> "Directory":
        child = paths.absolute_directory(self.path, name)
        if not child.startswith(paths.SEPARATOR):
            raise InvalidEntryError(f"cannot resolve relative directory {name!r} without a path",
                                    operation="DIRECTORY")
        return Directory(self.bucket, child)

    def create_directory(self, name: str) -> "Directory":
        """
        Create the directory name below this one.

        Writes a zero-byte marker at the directory key. Creating an existing
        directory rewrites its marker.

        Args:
            name (str): Relative or absolute directory name

        Returns:
            Directory: The created directory

        Raises:
            StorageError: If the marker cannot be written
        """
        trace_op("create_directory", self.path, name=name)
        start_time = time.time()
        child = self._child(name)
        if child.path == paths.SEPARATOR:
            self._check_entry("create_directory")
            return child
        self.put_bytes(child.path, b"")
        logger.debug(f"Created directory marker {child.path}")
        time_function("create_directory", start_time)
        return child

    def get_directory(self, name: str) -> "Directory":
        """
        Look up the directory name below this one.

        An empty name returns this directory without any I/O. Otherwise the
        marker object at the directory key must exist. Any object at that
        key satisfies the lookup, whatever its size.

        Raises:
            NotFoundError: If the marker cannot be found
        """
        trace_op("get_directory", self.path, name=name)
        if name == "":
            return self
        child = self._child(name)
        if child.path == paths.SEPARATOR:
            # The root has no marker
            return child
        try:
            self.container.item(paths.storage_key(child.path))
        except ObjectStoreError as e:
            raise NotFoundError(f"could not get directory marker {child.path}: {e.message}",
                                key=child.path, operation="DIRECTORY") from e
        return child

    def list_directories(self) -> Dict[str, "Directory"]:
        """
        List the immediate child directories.

        A child directory is reported once however many keys lie below it,
        e.g. /d/dir1/, /d/dir1/file1, /d/dir1/dir2/ and /d/dir1/dir2/file2
        all report "dir1".

        Directories implied only by deeper keys are listed too, even when no
        marker exists for them: with just /d/a/b/file stored, "a" is listed,
        yet get_directory("a") raises NotFoundError because /d/a/ holds no
        marker. Use the returned Directory objects directly instead of
        looking them up again.

        Returns:
            Dict[str, Directory]: Child directories keyed by their name,
            without the trailing separator

        Raises:
            InvalidEntryError: If this directory has no path
            StorageError: If the enumeration fails
        """
        self._check_entry("list_directories")
        trace_op("list_directories", self.path)
        start_time = time.time()
        prefix = paths.storage_key(self.path)
        directories = {}
        for item in iter_items(self.container, prefix, self.bucket.page_size):
            kind, name = classify(item.name[len(prefix):])
            if kind in (EntryKind.DIRECTORY, EntryKind.DESCENDANT) and name and name not in directories:
                directories[name] = Directory(self.bucket, paths.absolute_directory(self.path, name))
        time_function("list_directories", start_time)
        return directories

    def list_objects(self) -> List[str]:
        """
        List the names of objects stored directly in this directory.

        Raises:
            InvalidEntryError: If this directory has no path
            StorageError: If the enumeration fails
        """
        self._check_entry("list_objects")
        trace_op("list_objects", self.path)
        start_time = time.time()
        prefix = paths.storage_key(self.path)
        objects = []
        for item in iter_items(self.container, prefix, self.bucket.page_size):
            kind, name = classify(item.name[len(prefix):])
            if kind is EntryKind.OBJECT:
                objects.append(name)
        time_function("list_objects", start_time)
        return objects

    def delete_directory(self) -> None:
        """
        Delete every object under this directory, at any depth.

        Objects are removed one at a time. The first failure stops the walk
        and is raised; objects removed before it stay removed.

        Raises:
            InvalidEntryError: If this directory has no path
            StorageError: If an enumeration or removal fails
        """
        self._check_entry("delete_directory")
        trace_op("delete_directory", self.path)
        start_time = time.time()
        removed = 0
        try:
            for item in iter_items(self.container, paths.storage_key(self.path), self.bucket.page_size):
                self.container.remove_item(item.name)
                removed += 1
        except ObjectStoreError as e:
            logger.error(f"delete_directory {self.path} failed after removing {removed} objects: {e}")
            raise
        logger.info(f"Removed {removed} objects under {self.path}")
        time_function("delete_directory", start_time)

    def get(self, name: str) -> Tuple[BinaryIO, Dict[str, str]]:
        """
        Open the object name for reading.

        Only metadata entries with string values are returned as tags.

        Returns:
            Tuple[BinaryIO, Dict[str, str]]: An open stream, which the caller
            must close, and the object tags

        Raises:
            InvalidEntryError: If this directory has no path
            NotFoundError: If the object does not exist
            StorageError: If the object or its metadata cannot be read
        """
        self._check_entry("get")
        key = paths.absolute(self.path, name)
        trace_op("get", key)
        item = self.container.item(paths.storage_key(key))
        stream = item.open()
        try:
            metadata = item.metadata()
        except Exception:
            stream.close()
            raise
        tags = {k: v for k, v in metadata.items() if isinstance(v, str)}
        return stream, tags

    def get_bytes(self, name: str) -> Tuple[bytes, Dict[str, str]]:
        """Read the whole object name into memory, with its tags."""
        stream, tags = self.get(name)
        with closing(stream):
            try:
                data = stream.read()
            except OSError as e:
                raise StorageError(f"could not read {name}: {e}",
                                   key=paths.absolute(self.path, name), operation="GET") from e
        return data, tags

    def put(self, name: str, reader: BinaryIO, size: int, tags: Optional[Dict[str, str]] = None) -> None:
        """
        Store size bytes from reader as the object name.

        Any existing object at that key is replaced. Separators in tag keys
        are replaced with "-".

        Raises:
            InvalidEntryError: If this directory has no path
            StorageError: If the write fails
        """
        self._check_entry("put")
        key = paths.absolute(self.path, name)
        trace_op("put", key, size=size)
        self.container.put(paths.storage_key(key), reader, size, sanitize_tags(tags))

    def put_bytes(self, name: str, data: bytes, tags: Optional[Dict[str, str]] = None) -> None:
        """Store data as the object name."""
        data = data or b""
        self.put(name, BytesIO(data), len(data), tags)

    def delete(self, name: str) -> None:
        """
        Remove the object name.

        Raises:
            InvalidEntryError: If this directory has no path
            NotFoundError: If the container reports the object missing
            StorageError: If the removal fails
        """
        self._check_entry("delete")
        key = paths.absolute(self.path, name)
        trace_op("delete", key)
        self.container.remove_item(paths.storage_key(key))
