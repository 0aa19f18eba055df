"""
SHA-256 digests of payloads.

The hex form matches what command-line tools print for the same bytes, e.g.:

    curl -s localhost:8888 | jq -c .Data | tr -d '\\n' | shasum -a 256

The trailing newline added by text pipelines has to be stripped first, or
the digests differ.
"""

import base64
from typing import Union

from cryptography.hazmat.primitives.hashes import Hash, SHA256

DIGEST_SIZE = SHA256.digest_size


def _as_bytes(data: Union[bytes, str]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def compute_digest(data: Union[bytes, str]) -> bytes:
    """Compute the 32-byte SHA-256 digest of data. Text is hashed as UTF-8."""
    digest = Hash(SHA256())
    digest.update(_as_bytes(data))
    return digest.finalize()


def compute_digest_hex(data: Union[bytes, str]) -> str:
    """Compute SHA-256 digest and return it as lowercase hex."""
    return compute_digest(data).hex()


def compute_digest_b64(data: Union[bytes, str]) -> str:
    """Compute SHA-256 digest and return base64-encoded."""
    return base64.b64encode(compute_digest(data)).decode("ascii")
