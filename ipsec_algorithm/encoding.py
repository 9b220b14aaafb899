"""
Binary encoding of algorithm descriptors.

Provides a deterministic wire format for handing a descriptor across a
process boundary.

Format (big-endian):
    [version: 1 byte][name_len: 1 byte][name: utf-8]
    [key_len: 2 bytes][key]
    [has_trunc: 1 byte][trunc_bits: 4 bytes, only if has_trunc == 1]
"""

import base64
import binascii
import logging
import struct

from ipsec_algorithm.algorithms import AlgorithmIdentifier
from ipsec_algorithm.descriptor import IpSecAlgorithm
from ipsec_algorithm.errors import MalformedEncodingError

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1

_HEADER = struct.Struct(">BB")
_KEY_LEN = struct.Struct(">H")
_FLAG = struct.Struct(">B")
_TRUNC = struct.Struct(">I")


def encode(algorithm: IpSecAlgorithm) -> bytes:
    """
    Encode a descriptor into the wire format.

    Args:
        algorithm: Descriptor to encode

    Returns:
        Encoded bytes
    """
    name = algorithm.name.value.encode("utf-8")
    key = algorithm.key

    if len(name) > 0xFF:
        raise ValueError(f"Algorithm name too long: {len(name)} bytes")
    if len(key) > 0xFFFF:
        raise ValueError(f"Key too long: {len(key)} bytes")

    parts = [
        _HEADER.pack(FORMAT_VERSION, len(name)),
        name,
        _KEY_LEN.pack(len(key)),
        key,
    ]
    if algorithm.truncation_length_bits is None:
        parts.append(_FLAG.pack(0))
    else:
        parts.append(_FLAG.pack(1))
        parts.append(_TRUNC.pack(algorithm.truncation_length_bits))
    return b"".join(parts)


class _Reader:
    """Cursor over encoded bytes that fails on truncation."""

    def __init__(self, data: bytes):
        self._data = data
        self._offset = 0

    def take(self, size: int, field: str) -> bytes:
        end = self._offset + size
        if end > len(self._data):
            raise MalformedEncodingError(f"Encoding truncated in {field}")
        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk

    def unpack(self, fmt: struct.Struct, field: str) -> tuple:
        return fmt.unpack(self.take(fmt.size, field))

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset


def decode(data: bytes, strict: bool = False) -> IpSecAlgorithm:
    """
    Decode a descriptor from the wire format.

    Args:
        data: Encoded bytes
        strict: Re-run key and truncation length validation

    Returns:
        Decoded IpSecAlgorithm

    Raises:
        MalformedEncodingError: If the encoding is truncated or inconsistent
        ValidationError: If strict and the decoded parameters are invalid
    """
    try:
        return _decode(bytes(data), strict)
    except MalformedEncodingError as e:
        logger.debug("Rejected IPsec algorithm encoding: %s", e)
        raise


def _decode(data: bytes, strict: bool) -> IpSecAlgorithm:
    reader = _Reader(data)

    version, name_len = reader.unpack(_HEADER, "header")
    if version != FORMAT_VERSION:
        raise MalformedEncodingError(f"Unsupported format version: {version}")

    raw_name = reader.take(name_len, "name")
    try:
        name = raw_name.decode("utf-8")
    except UnicodeDecodeError:
        raise MalformedEncodingError("Algorithm name is not valid UTF-8") from None
    try:
        algorithm = AlgorithmIdentifier(name)
    except ValueError:
        raise MalformedEncodingError(f"Unknown algorithm in encoding: {name!r}", algorithm=name) from None

    (key_len,) = reader.unpack(_KEY_LEN, "key length")
    key = reader.take(key_len, "key")

    (has_trunc,) = reader.unpack(_FLAG, "truncation flag")
    if has_trunc == 0:
        truncation_length_bits = None
    elif has_trunc == 1:
        (truncation_length_bits,) = reader.unpack(_TRUNC, "truncation length")
    else:
        raise MalformedEncodingError(f"Invalid truncation flag: {has_trunc}")

    if algorithm.algorithm_class.requires_truncation_length != (truncation_length_bits is not None):
        raise MalformedEncodingError(
            f"Truncation flag {has_trunc} inconsistent with {algorithm.value}",
            algorithm=algorithm.value,
        )

    if reader.remaining:
        raise MalformedEncodingError(f"{reader.remaining} trailing bytes after encoding")

    if strict:
        return IpSecAlgorithm(algorithm, key, truncation_length_bits)
    return IpSecAlgorithm._trusted(algorithm, key, truncation_length_bits)


def to_base64(data: bytes) -> str:
    """Encode bytes to URL-safe base64 string."""
    return base64.urlsafe_b64encode(data).decode("ascii")


def from_base64(data: str) -> bytes:
    """
    Decode URL-safe base64 string to bytes.

    Raises:
        MalformedEncodingError: If the string is not valid base64
    """
    try:
        return base64.urlsafe_b64decode(data.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as e:
        raise MalformedEncodingError(f"Invalid base64: {e}") from None
