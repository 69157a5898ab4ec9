# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
S3 Container Module.

This module adapts an S3 (or S3 compatible) bucket to the Container
interface using boto3. Native botocore errors are converted into the object
store error types at this boundary so that the directory layer never sees
provider specific exceptions.

Classes:
    S3Item: Handle to one S3 object.
    S3Container: Container backed by an S3 bucket.

Functions:
    _convert_client_error: Helper function to convert botocore errors to object store exceptions.
"""
from typing import Any, BinaryIO, Dict, Optional, Union

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from urllib3.exceptions import HTTPError

from .container import Container, Item, ItemPage
from .exceptions import NotFoundError, ObjectStoreError, StorageError
from .types import ItemInfo, ListItemsOptions
from ..utils import logger

NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound", "NoSuchBucket"}

def _convert_client_error(e: Union[ClientError, BotoCoreError], key: str = None,
                          operation: str = None) -> ObjectStoreError:
    """
    Convert botocore errors to appropriate object store errors.

    Args:
        e (Union[ClientError, BotoCoreError]): The botocore error to convert.
        key (str, optional): The key being operated on. Defaults to None.
        operation (str, optional): The operation being performed. Defaults to None.

    Returns:
        ObjectStoreError: The converted error.
    """
    if isinstance(e, ClientError):
        error = e.response.get("Error", {})
        code = str(error.get("Code", ""))
        message = error.get("Message") or str(e)
        if code in NOT_FOUND_CODES:
            if code == "NoSuchBucket":
                return NotFoundError(f"bucket does not exist: {message}", key=key, operation=operation)
            return NotFoundError(f"object {key} does not exist", key=key, operation=operation)
        if code in ("403", "AccessDenied", "Forbidden"):
            return StorageError(f"access denied to {key}", key=key, operation=operation)
        return StorageError(f"{code}: {message}", key=key, operation=operation)
    return StorageError(str(e), key=key, operation=operation)

class S3Body:
    """
    Readable S3 object body.

    Wraps the botocore StreamingBody so that failures while reading
    (truncated responses, dropped connections) surface as StorageError
    carrying the object key.
    """

    def __init__(self, body, key: str):
        self.body = body
        self.key = key

    def read(self, amt: Optional[int] = None) -> bytes:
        try:
            return self.body.read(amt)
        except (BotoCoreError, HTTPError) as e:
            logger.error(f"Reading {self.key} failed: {e}")
            raise StorageError(f"could not read {self.key}: {e}", key=self.key, operation="GET") from e

    def close(self):
        self.body.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

class S3Item(Item):
    """
    Handle to a single S3 object.

    Metadata is fetched lazily with HeadObject unless the item was produced
    by a HeadObject call already.
    """

    def __init__(self, container: "S3Container", info: ItemInfo, head_loaded: bool = False):
        self.container = container
        self.info = info
        self._head_loaded = head_loaded

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def size(self) -> int:
        return self.info.size

    def open(self) -> BinaryIO:
        try:
            response = self.container.client.get_object(Bucket=self.container.bucket, Key=self.name)
        except (ClientError, BotoCoreError) as e:
            raise _convert_client_error(e, self.name, "GET") from e
        return S3Body(response["Body"], self.name)

    def metadata(self) -> Dict[str, Any]:
        if not self._head_loaded:
            self.info = self.container._head(self.name, "METADATA")
            self._head_loaded = True
        return dict(self.info.user_metadata)

class S3Container(Container):
    """
    Container backed by an S3 bucket.

    Attributes:
        bucket (str): Name of the S3 bucket
        client: boto3 S3 client used for every request
    """

    def __init__(self, bucket: str, region: Optional[str] = None, endpoint_url: Optional[str] = None,
                 client=None):
        """
        Initialize the container.

        Args:
            bucket (str): Name of the S3 bucket
            region (str, optional): AWS region of the bucket
            endpoint_url (str, optional): Endpoint of an S3 compatible service
            client (optional): Pre-built boto3 S3 client; one is created when omitted
        """
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        if client is None:
            client = boto3.client("s3", region_name=region, endpoint_url=endpoint_url)
        self.client = client

    @property
    def name(self) -> str:
        return self.bucket

    def _head(self, key: str, operation: str) -> ItemInfo:
        try:
            response = self.client.head_object(Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise _convert_client_error(e, key, operation) from e
        return ItemInfo(
            name=key,
            size=response.get("ContentLength", 0),
            last_modified=response.get("LastModified"),
            etag=response.get("ETag"),
            user_metadata=response.get("Metadata", {}),
        )

    def item(self, key: str) -> Item:
        return S3Item(self, self._head(key, "HEAD"), head_loaded=True)

    def items(self, options: ListItemsOptions) -> ItemPage:
        kwargs = {"Bucket": self.bucket, "Prefix": options.prefix or ""}
        if options.max_keys:
            kwargs["MaxKeys"] = options.max_keys
        if options.cursor:
            kwargs["ContinuationToken"] = options.cursor
        try:
            response = self.client.list_objects_v2(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise _convert_client_error(e, options.prefix, "LIST") from e

        items = [
            S3Item(self, ItemInfo(
                name=obj["Key"],
                size=obj.get("Size", 0),
                last_modified=obj.get("LastModified"),
                etag=obj.get("ETag"),
            ))
            for obj in response.get("Contents", [])
        ]
        cursor = response.get("NextContinuationToken", "") if response.get("IsTruncated") else ""
        return ItemPage(items=items, cursor=cursor)

    def put(self, key: str, reader: BinaryIO, size: int, metadata: Dict[str, Any]) -> Item:
        # S3 user metadata only carries strings
        s3_metadata = {k: str(v) for k, v in (metadata or {}).items()}
        try:
            response = self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=reader,
                ContentLength=size,
                Metadata=s3_metadata,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"put_object failed for {key}: {e}")
            raise _convert_client_error(e, key, "PUT") from e
        return S3Item(self, ItemInfo(name=key, size=size, etag=response.get("ETag"),
                                     user_metadata=s3_metadata), head_loaded=True)

    def remove_item(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise _convert_client_error(e, key, "DELETE") from e
