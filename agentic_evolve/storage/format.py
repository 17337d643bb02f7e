"""The ``.aevolve`` binary container for patterns.

Layout (little endian): magic ``AEVL``, u16 version, u32 pattern count, then
for each pattern a u32 length followed by that many bytes of JSON.
"""

from __future__ import annotations

import json
import struct
from typing import Iterable

from ..model.errors import SerializationError, StorageError
from ..model.pattern import Pattern

MAGIC = b"AEVL"
FORMAT_VERSION = 1

_HEADER = struct.Struct("<4sHI")
_LENGTH = struct.Struct("<I")


def write_patterns(patterns: Iterable[Pattern]) -> bytes:
    """Serialize patterns into the ``.aevolve`` format."""
    patterns = list(patterns)
    out = bytearray(_HEADER.pack(MAGIC, FORMAT_VERSION, len(patterns)))
    for pattern in patterns:
        body = json.dumps(pattern.to_dict(), separators=(",", ":")).encode("utf-8")
        out += _LENGTH.pack(len(body))
        out += body
    return bytes(out)


def read_patterns(data: bytes) -> list[Pattern]:
    """Parse patterns from ``.aevolve`` bytes.

    Raises StorageError for a malformed container and SerializationError for
    a pattern record that is not valid pattern JSON.
    """
    data = bytes(data)
    if len(data) < _HEADER.size:
        raise StorageError("File too small")
    magic, _version, count = _HEADER.unpack_from(data)
    if magic != MAGIC:
        raise StorageError("Invalid magic bytes")

    patterns: list[Pattern] = []
    offset = _HEADER.size
    for _ in range(count):
        if offset + _LENGTH.size > len(data):
            raise StorageError("Unexpected end of file")
        (length,) = _LENGTH.unpack_from(data, offset)
        offset += _LENGTH.size
        if offset + length > len(data):
            raise StorageError("Unexpected end of file")
        try:
            record = json.loads(data[offset : offset + length].decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SerializationError(str(exc)) from exc
        patterns.append(Pattern.from_dict(record))
        offset += length
    return patterns