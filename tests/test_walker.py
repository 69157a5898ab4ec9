import pytest
from io import BytesIO
from unittest import mock
from objectstore.client.exceptions import StorageError
from objectstore.directory.walker import (
    EntryKind,
    classify,
    is_directory_object,
    iter_items,
    walk,
)

def _fill(container, keys):
    for key in keys:
        container.put(key, BytesIO(b"x"), 1, {})

def test_is_directory_object():
    assert is_directory_object("fileC") is None, "A plain name is an object"
    assert is_directory_object("dir1/") == "dir1"
    assert is_directory_object("dir1/fileA") == "dir1"
    assert is_directory_object("dir1/dir2/fileB") is None, "Deeper descendants are not immediate children"
    assert is_directory_object("dir1/dir2/") is None
    assert is_directory_object("") is None

def test_classify():
    assert classify("") == (EntryKind.SELF, "")
    assert classify("fileC") == (EntryKind.OBJECT, "fileC")
    assert classify("dir1/") == (EntryKind.DIRECTORY, "dir1")
    assert classify("dir1/dir2/fileB") == (EntryKind.DESCENDANT, "dir1")
    assert classify("/odd") == (EntryKind.DIRECTORY, "")

def test_iter_items_paginates(container):
    keys = [f"p/key-{i:03d}" for i in range(25)] + ["q/other"]
    _fill(container, keys)

    with mock.patch.object(container, "items", wraps=container.items) as spy:
        names = [item.name for item in iter_items(container, "p/", page_size=10)]

    assert names == keys[:25], "Every key under the prefix must be visited once, in order"
    assert spy.call_count == 3, "25 keys in pages of 10 need three calls"
    assert all(call.args[0].max_keys == 10 for call in spy.call_args_list)

def test_iter_items_is_lazy(container):
    _fill(container, [f"p/{i}" for i in range(5)])
    with mock.patch.object(container, "items", wraps=container.items) as spy:
        items = iter_items(container, "p/", page_size=2)
        assert spy.call_count == 0
        next(items)
        assert spy.call_count == 1

def test_iter_items_restarts_from_beginning(container):
    _fill(container, ["p/a", "p/b", "p/c"])
    first = [item.name for item in iter_items(container, "p/", page_size=1)]
    second = [item.name for item in iter_items(container, "p/", page_size=1)]
    assert first == second == ["p/a", "p/b", "p/c"]

def test_walk_counts_items(container):
    _fill(container, ["p/a", "p/b/c", "other"])
    seen = []
    count = walk(container, "p/", 1, lambda item: seen.append(item.name))
    assert count == 2
    assert seen == ["p/a", "p/b/c"]

def test_walk_stops_on_callback_error(container):
    _fill(container, ["p/a", "p/b", "p/c"])
    seen = []

    def fn(item):
        seen.append(item.name)
        if item.name == "p/b":
            raise StorageError("boom", key=item.name, operation="DELETE")

    with pytest.raises(StorageError):
        walk(container, "p/", 10, fn)
    assert seen == ["p/a", "p/b"], "The walk must stop at the first error"

def test_walk_propagates_enumeration_error(container):
    with mock.patch.object(container, "items", side_effect=StorageError("list failed", operation="LIST")):
        with pytest.raises(StorageError) as exc_info:
            walk(container, "p/", 10, lambda item: None)
    assert exc_info.value.code == "ERR_STORAGE_LIST"
