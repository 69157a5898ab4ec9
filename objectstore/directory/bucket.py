# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Buckets hold the container shared by all directories derived from them.
"""
from ..client.container import Container
from ..client.session import Session, create_container
from ..utils import logger
from .directory import Directory
from .paths import SEPARATOR
from .walker import PAGE_SIZE

class Bucket:
    """
    A backing container together with the endpoint it was reached through.

    Attributes:
        container (Container): Container every directory of this bucket uses
        host_endpoint (str): Prefix of the string form of each directory
        page_size (int): Keys requested per enumeration call
    """

    def __init__(self, container: Container, host_endpoint: str = "", page_size: int = PAGE_SIZE):
        self.container = container
        self.host_endpoint = host_endpoint.rstrip(SEPARATOR)
        self.page_size = page_size

    @classmethod
    def connect(cls, session: Session = None) -> "Bucket":
        """
        Connect to the container described by session.

        Args:
            session (Session, optional): Connection settings; read from the
                environment when omitted

        Returns:
            Bucket: The connected bucket

        Raises:
            ConfigurationError: If the session is invalid
        """
        session = session or Session.from_env()
        container = create_container(session)
        if session.provider == "s3":
            if session.endpoint_url:
                host_endpoint = f"{session.endpoint_url.rstrip(SEPARATOR)}/{session.bucket}"
            else:
                host_endpoint = f"s3://{session.bucket}"
        elif session.provider == "local":
            host_endpoint = f"file://{session.root_dir.rstrip(SEPARATOR)}"
        else:
            host_endpoint = f"memory://{container.name}"
        logger.info(f"Connected to {session.provider} container {container.name}")
        return cls(container, host_endpoint=host_endpoint, page_size=session.page_size)

    def root(self) -> Directory:
        """Return the directory at the root of the bucket."""
        return Directory(self, SEPARATOR)

    def open_directory(self, path: str) -> Directory:
        """
        Open an existing directory.

        path may be a directory path or the string form of a directory of
        this bucket, as returned by str(directory).

        Raises:
            NotFoundError: If the directory marker does not exist
        """
        if self.host_endpoint and path.startswith(self.host_endpoint):
            path = path[len(self.host_endpoint):] or SEPARATOR
        if not path.startswith(SEPARATOR):
            path = SEPARATOR + path
        return self.root().get_directory(path)

    def create_directory(self, path: str) -> Directory:
        """Create a directory relative to the bucket root."""
        return self.root().create_directory(path)
