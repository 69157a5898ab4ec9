import pytest
from unittest import mock
from objectstore.client.exceptions import ConfigurationError, NotFoundError
from objectstore.client.local import LocalContainer
from objectstore.client.memory import MemoryContainer
from objectstore.client.session import DEFAULT_PAGE_SIZE, Session, create_container
from objectstore.directory import Bucket

def test_session_defaults():
    session = Session.from_env({})
    assert session.provider == "memory"
    assert session.bucket is None
    assert session.page_size == DEFAULT_PAGE_SIZE

def test_session_from_env():
    session = Session.from_env({
        "OBJECTSTORE_PROVIDER": "S3",
        "OBJECTSTORE_BUCKET": "backups",
        "OBJECTSTORE_REGION": "us-east-1",
        "OBJECTSTORE_ENDPOINT_URL": "http://minio:9000",
        "OBJECTSTORE_PAGE_SIZE": "500",
    })
    assert session == Session(provider="s3", bucket="backups", region="us-east-1",
                              endpoint_url="http://minio:9000", page_size=500)

def test_session_bad_page_size():
    with pytest.raises(ConfigurationError) as exc_info:
        Session.from_env({"OBJECTSTORE_PAGE_SIZE": "lots"})
    assert exc_info.value.code == "ERR_CONFIG"

@pytest.mark.parametrize("session", [
    Session(provider="ftp"),
    Session(provider="s3"),
    Session(provider="local"),
    Session(provider="memory", page_size=0),
])
def test_invalid_sessions(session):
    with pytest.raises(ConfigurationError):
        create_container(session)

def test_create_memory_container():
    container = create_container(Session(bucket="scratch"))
    assert isinstance(container, MemoryContainer)
    assert container.name == "scratch"

def test_create_local_container(tmp_path):
    container = create_container(Session(provider="local", root_dir=str(tmp_path / "root")))
    assert isinstance(container, LocalContainer)
    assert (tmp_path / "root").is_dir()

def test_create_s3_container():
    with mock.patch("objectstore.client.s3.boto3") as boto3:
        container = create_container(Session(provider="s3", bucket="backups", region="us-east-1"))
    assert container.name == "backups"
    boto3.client.assert_called_once_with("s3", region_name="us-east-1", endpoint_url=None)

def test_bucket_connect_memory():
    bucket = Bucket.connect(Session(bucket="scratch", page_size=7))
    assert bucket.host_endpoint == "memory://scratch"
    assert bucket.page_size == 7
    assert str(bucket.root()) == "memory://scratch/"

def test_bucket_connect_local(tmp_path):
    root_dir = str(tmp_path / "store")
    bucket = Bucket.connect(Session(provider="local", root_dir=root_dir))
    created = bucket.create_directory("a/b")
    assert str(created) == f"file://{root_dir}/a/b/"

    reopened = Bucket.connect(Session(provider="local", root_dir=root_dir))
    assert reopened.open_directory("a/b").path == "/a/b/"

def test_bucket_connect_s3_endpoints():
    with mock.patch("objectstore.client.s3.boto3"):
        plain = Bucket.connect(Session(provider="s3", bucket="backups"))
        custom = Bucket.connect(Session(provider="s3", bucket="backups", endpoint_url="http://minio:9000/"))
    assert plain.host_endpoint == "s3://backups"
    assert custom.host_endpoint == "http://minio:9000/backups"

def test_bucket_connect_from_env(monkeypatch):
    monkeypatch.setenv("OBJECTSTORE_PROVIDER", "memory")
    monkeypatch.setenv("OBJECTSTORE_BUCKET", "from-env")
    bucket = Bucket.connect()
    assert bucket.container.name == "from-env"

def test_open_directory(bucket):
    created = bucket.create_directory("x/y")
    assert bucket.open_directory("/x/y/") == created
    assert bucket.open_directory("x/y") == created
    assert bucket.open_directory("memory://test-bucket/x/y/") == created
    assert bucket.open_directory("/").path == "/"
    assert bucket.open_directory("").path == "/"
    with pytest.raises(NotFoundError):
        bucket.open_directory("x/z")
