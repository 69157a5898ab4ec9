import pytest
import os
from io import BytesIO
from objectstore.client.memory import MemoryContainer
from objectstore.directory import Bucket

TREE_KEYS = ["p/dir1/", "p/dir1/fileA", "p/dir1/dir2/", "p/dir1/dir2/fileB", "p/fileC"]

def pytest_configure(config):
    """Configure test environment."""
    # Keep tests on the in-memory provider unless told otherwise
    os.environ.setdefault("OBJECTSTORE_PROVIDER", "memory")

@pytest.fixture
def container():
    """Fixture to provide an empty in-memory container."""
    return MemoryContainer("test-bucket")

@pytest.fixture
def bucket(container):
    """Fixture to provide a bucket over the in-memory container."""
    return Bucket(container, host_endpoint="memory://test-bucket")

@pytest.fixture
def root(bucket):
    """Fixture to provide the root directory of the bucket."""
    return bucket.root()

@pytest.fixture
def tree(container):
    """Populate the container with a small tree under p/."""
    for key in TREE_KEYS:
        data = b"" if key.endswith("/") else key.encode()
        container.put(key, BytesIO(data), len(data), {})
    return TREE_KEYS
