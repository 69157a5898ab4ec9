# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

@dataclass
class ItemInfo:
    """Metadata for a stored item."""
    name: str
    size: int
    last_modified: Optional[datetime] = None
    etag: Optional[str] = None
    user_metadata: Dict[str, Any] = field(default_factory=dict)

@dataclass
class ListItemsOptions:
    """Options for enumerating items under a prefix."""
    prefix: str = ""
    cursor: str = ""
    max_keys: Optional[int] = None
