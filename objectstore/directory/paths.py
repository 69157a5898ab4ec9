# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Path helpers for the directory layer.

Paths seen by callers are absolute when they start with SEPARATOR, which
denotes the bucket root. Directory paths always end with SEPARATOR. Keys
handed to a container never carry the leading separator: S3 drops it when
creating objects but honors it while filtering by prefix, and GCS creates
an explicit "/" object, so it is stripped at the I/O boundary only.
"""
import posixpath

SEPARATOR = "/"

def absolute(base: str, name: str) -> str:
    """
    Resolve name against the directory path base.

    Args:
        base (str): Canonical directory path, ending with SEPARATOR
        name (str): Relative or absolute name

    Returns:
        str: name unchanged if it is absolute, base + name otherwise, and
        "" for an empty name
    """
    if name == "":
        return ""
    if not name.startswith(SEPARATOR):
        name = base + name
    return name

def clean(path: str) -> str:
    """Collapse redundant separators and resolve "." and ".." elements."""
    if path == "":
        return "."
    cleaned = posixpath.normpath(path)
    # normpath keeps exactly two leading slashes
    if cleaned.startswith(SEPARATOR):
        cleaned = SEPARATOR + cleaned.lstrip(SEPARATOR)
    return cleaned

def absolute_directory(base: str, name: str) -> str:
    """
    Resolve name against base as a directory path.

    The result is cleaned and ends with exactly one SEPARATOR. An empty
    name resolves to base itself.

    Args:
        base (str): Canonical directory path, ending with SEPARATOR
        name (str): Relative or absolute directory name

    Returns:
        str: Canonical directory path
    """
    path = absolute(base, name) if name != "" else base
    if path == "":
        return ""
    path = clean(path)
    if path.endswith(SEPARATOR):
        return path
    return path + SEPARATOR

def storage_key(path: str) -> str:
    """Strip one leading SEPARATOR before handing a path to a container."""
    if path.startswith(SEPARATOR):
        return path[len(SEPARATOR):]
    return path

def is_canonical_directory(path: str) -> bool:
    """Report whether path is an absolute, cleaned directory path."""
    return path.startswith(SEPARATOR) and path.endswith(SEPARATOR) and \
        absolute_directory(SEPARATOR, path) == path
