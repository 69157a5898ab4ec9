# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Local filesystem container.

Stores every key as a flat pair of files under a root directory:

    {root}/{quoted key}.data       # content
    {root}/{quoted key}.meta.json  # user metadata

Keys are percent-encoded so that separators inside keys never create real
directories; hierarchy is left entirely to the directory layer.
"""
import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, BinaryIO, Dict
from urllib.parse import quote, unquote

from .container import Container, Item, ItemPage, read_exactly
from .exceptions import NotFoundError, StorageError
from .types import ItemInfo, ListItemsOptions
from ..utils import logger

_CONTENT_SUFFIX = ".data"
_METADATA_SUFFIX = ".meta.json"

def _convert_os_error(e: OSError, key: str, operation: str):
    if isinstance(e, FileNotFoundError):
        return NotFoundError(f"item {key} not found", key=key, operation=operation)
    return StorageError(f"{operation.lower()} {key} failed: {e}", key=key, operation=operation)

class LocalItem(Item):
    """An item stored by a LocalContainer."""

    def __init__(self, container: "LocalContainer", info: ItemInfo):
        self.container = container
        self.info = info

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def size(self) -> int:
        return self.info.size

    def open(self) -> BinaryIO:
        try:
            return open(self.container._content_path(self.name), "rb")
        except OSError as e:
            raise _convert_os_error(e, self.name, "GET") from e

    def metadata(self) -> Dict[str, Any]:
        path = self.container._metadata_path(self.name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            raise StorageError(f"could not read metadata for {self.name}: {e}",
                               key=self.name, operation="METADATA") from e

class LocalContainer(Container):
    """
    A Container persisted in a local directory.

    Attributes:
        root (Path): Directory holding the item files
    """

    def __init__(self, root, name: str = None):
        self.root = Path(root).resolve()
        self._name = name or self.root.name
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"could not create container root {self.root}: {e}",
                               operation="CONNECT") from e

    @property
    def name(self) -> str:
        return self._name

    def _content_path(self, key: str) -> Path:
        return self.root / (quote(key, safe="") + _CONTENT_SUFFIX)

    def _metadata_path(self, key: str) -> Path:
        return self.root / (quote(key, safe="") + _METADATA_SUFFIX)

    def _info(self, key: str) -> ItemInfo:
        stat = os.stat(self._content_path(key))
        return ItemInfo(
            name=key,
            size=stat.st_size,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )

    def item(self, key: str) -> Item:
        if not key:
            raise NotFoundError("empty key", key=key, operation="HEAD")
        try:
            return LocalItem(self, self._info(key))
        except OSError as e:
            raise _convert_os_error(e, key, "HEAD") from e

    def items(self, options: ListItemsOptions) -> ItemPage:
        prefix = options.prefix or ""
        try:
            names = os.listdir(self.root)
        except OSError as e:
            raise StorageError(f"could not list {self.root}: {e}", key=prefix, operation="LIST") from e

        keys = sorted(
            key for key in (unquote(n[:-len(_CONTENT_SUFFIX)]) for n in names if n.endswith(_CONTENT_SUFFIX))
            if key.startswith(prefix) and key > options.cursor
        )
        page = []
        for key in keys:
            if options.max_keys and len(page) == options.max_keys:
                return ItemPage(items=page, cursor=page[-1].name)
            try:
                page.append(LocalItem(self, self._info(key)))
            except FileNotFoundError:
                # Removed since the directory was listed
                continue
            except OSError as e:
                raise _convert_os_error(e, key, "LIST") from e
        return ItemPage(items=page, cursor="")

    def put(self, key: str, reader: BinaryIO, size: int, metadata: Dict[str, Any]) -> Item:
        if not key:
            raise StorageError("empty key", key=key, operation="PUT")
        data = read_exactly(reader, size, key)
        try:
            encoded = json.dumps(metadata or {})
        except (TypeError, ValueError) as e:
            raise StorageError(f"metadata for {key} is not serializable: {e}", key=key, operation="PUT") from e

        try:
            self._write_atomic(self._metadata_path(key), encoded.encode("utf-8"))
            self._write_atomic(self._content_path(key), data)
        except OSError as e:
            raise _convert_os_error(e, key, "PUT") from e
        logger.debug(f"Stored {key} ({len(data)} bytes) under {self.root}")
        return LocalItem(self, self._info(key))

    def _write_atomic(self, path: Path, data: bytes):
        fd, tmp = tempfile.mkstemp(dir=self.root, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp, path)
        except OSError:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def remove_item(self, key: str) -> None:
        try:
            os.remove(self._content_path(key))
        except OSError as e:
            raise _convert_os_error(e, key, "DELETE") from e
        try:
            os.remove(self._metadata_path(key))
        except FileNotFoundError:
            pass
        except OSError as e:
            raise _convert_os_error(e, key, "DELETE") from e
        logger.debug(f"Removed {key} from {self.root}")
