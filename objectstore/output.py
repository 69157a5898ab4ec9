# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Phase output helper.

Emits key/value pairs on stdout as single lines that a supervising process
can pick out of a command's output:

    ###Phase-output###: {"key":"version","value":"0.1.0"}
"""
import json
import re
from dataclasses import asdict, dataclass

from .client.exceptions import OutputError

PHASE_OP_STRING = "###Phase-output###:"

_VALID_KEY = re.compile(r"[a-zA-Z0-9_]*")

@dataclass
class Output:
    key: str
    value: str

def marshal_output(key: str, value: str) -> str:
    try:
        return json.dumps(asdict(Output(key=key, value=value)), separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise OutputError(f"Failed to marshal key-value pair: {e}") from e

def unmarshal_output(op_string: str) -> Output:
    """Parse the JSON part of a phase output line."""
    try:
        raw = json.loads(op_string)
    except ValueError as e:
        raise OutputError(f"Failed to unmarshal key-value pair: {e}") from e
    if not isinstance(raw, dict):
        raise OutputError("Failed to unmarshal key-value pair: expected a JSON object")
    return Output(key=raw.get("key", ""), value=raw.get("value", ""))

def validate_key(key: str):
    """
    Validate a phase output key.

    Raises:
        OutputError: If key is empty or holds anything but alphanumeric
            characters and underscores
    """
    if key == "":
        raise OutputError("Key should not be empty")
    if not _VALID_KEY.fullmatch(key):
        raise OutputError("Key should contain only alphanumeric characters and underscore")

def print_output(key: str, value: str):
    print(PHASE_OP_STRING, marshal_output(key, value))
