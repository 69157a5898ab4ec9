# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from typing import Optional


class ObjectStoreError(Exception):
    """Base exception for object store errors."""
    def __init__(self, message: str, code: str = "ERR_UNKNOWN", key: Optional[str] = None,
                 operation: Optional[str] = None):
        self.code = code
        self.message = message
        self.key = key
        self.operation = operation
        super().__init__(f"{code}: {message}")


class InvalidEntryError(ObjectStoreError):
    """Operation invoked on a directory that is not bound to a path."""
    def __init__(self, message: str = "invalid entry", operation: str = None):
        super().__init__(message, code="ERR_INVALID_ENTRY", operation=operation)


class NotFoundError(ObjectStoreError):
    """Lookup of a key failed."""
    def __init__(self, message: str, key: str = None, operation: str = None):
        code = "ERR_NOT_FOUND"
        if operation:
            code = f"ERR_NOT_FOUND_{operation.upper()}"
        super().__init__(message, code=code, key=key, operation=operation)


class StorageError(ObjectStoreError):
    """Backing store operation failed."""
    def __init__(self, message: str, key: str = None, operation: str = None):
        code = "ERR_STORAGE"
        if operation:
            code = f"ERR_STORAGE_{operation.upper()}"
        super().__init__(message, code=code, key=key, operation=operation)


class ConfigurationError(ObjectStoreError):
    """Configuration or credential error."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_CONFIG")


class OutputError(ObjectStoreError):
    """Phase output could not be marshalled or validated."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_OUTPUT")
