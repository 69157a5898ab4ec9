# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Session Module.

This module holds the configuration needed to reach a backing container and
the factory that builds the matching Container implementation.

Environment Variables:
    OBJECTSTORE_PROVIDER: "memory", "local" or "s3" (default: "memory")
    OBJECTSTORE_BUCKET: Bucket name
    OBJECTSTORE_REGION: Bucket region (s3)
    OBJECTSTORE_ENDPOINT_URL: Endpoint of an S3 compatible service (s3)
    OBJECTSTORE_ROOT_DIR: Directory holding the items (local)
    OBJECTSTORE_PAGE_SIZE: Number of keys requested per enumeration call
"""
import os
from dataclasses import dataclass
from typing import Optional

from .container import Container
from .exceptions import ConfigurationError

DEFAULT_PAGE_SIZE = 10000

PROVIDERS = ("memory", "local", "s3")

@dataclass
class Session:
    """Connection settings for a backing container."""
    provider: str = "memory"
    bucket: Optional[str] = None
    region: Optional[str] = None
    endpoint_url: Optional[str] = None
    root_dir: Optional[str] = None
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_env(cls, environ=None) -> "Session":
        """
        Build a Session from OBJECTSTORE_* environment variables.

        Args:
            environ (dict, optional): Mapping to read instead of os.environ

        Returns:
            Session: The configured session

        Raises:
            ConfigurationError: If OBJECTSTORE_PAGE_SIZE is not an integer
        """
        env = os.environ if environ is None else environ
        page_size = env.get("OBJECTSTORE_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
        try:
            page_size = int(page_size)
        except ValueError:
            raise ConfigurationError(f"OBJECTSTORE_PAGE_SIZE must be an integer, got {page_size!r}")
        return cls(
            provider=env.get("OBJECTSTORE_PROVIDER", "memory").lower(),
            bucket=env.get("OBJECTSTORE_BUCKET") or None,
            region=env.get("OBJECTSTORE_REGION") or None,
            endpoint_url=env.get("OBJECTSTORE_ENDPOINT_URL") or None,
            root_dir=env.get("OBJECTSTORE_ROOT_DIR") or None,
            page_size=page_size,
        )

    def validate(self):
        """
        Check that the session names a usable provider.

        Raises:
            ConfigurationError: If a required setting is missing or invalid
        """
        if self.provider not in PROVIDERS:
            raise ConfigurationError(f"unknown provider {self.provider!r}, expected one of {', '.join(PROVIDERS)}")
        if self.page_size <= 0:
            raise ConfigurationError(f"page size must be positive, got {self.page_size}")
        if self.provider == "s3" and not self.bucket:
            raise ConfigurationError("s3 provider requires a bucket name")
        if self.provider == "local" and not self.root_dir:
            raise ConfigurationError("local provider requires a root directory")

def create_container(session: Session) -> Container:
    """
    Build the Container described by a session.

    Args:
        session (Session): Connection settings

    Returns:
        Container: A container for the configured provider

    Raises:
        ConfigurationError: If the session is invalid
    """
    session.validate()
    if session.provider == "s3":
        from .s3 import S3Container
        return S3Container(session.bucket, region=session.region, endpoint_url=session.endpoint_url)
    if session.provider == "local":
        from .local import LocalContainer
        return LocalContainer(session.root_dir, name=session.bucket)
    from .memory import MemoryContainer
    return MemoryContainer(session.bucket or "memory")
