"""
RSA key generation and PEM encoding.

Private keys are stored as PKCS1 ("RSA PRIVATE KEY"), public keys as
SubjectPublicKeyInfo ("PUBLIC KEY"). Existing key files depend on this
combination, so both formats are kept as they are.
"""

import logging
import re
from typing import Tuple, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .config import KEY_SIZE, PRIVATE_KEY_LABEL, PUBLIC_EXPONENT, PUBLIC_KEY_LABEL
from .errors import KeyDecodeError, KeyGenerationError

logger = logging.getLogger(__name__)

_PEM_BLOCK = re.compile(
    rb"-----BEGIN ([^\r\n-]+)-----\r?\n(.*?)-----END \1-----",
    re.DOTALL,
)


# ============================================================================
# Key generation
# ============================================================================

def generate_key_pair() -> Tuple[rsa.RSAPrivateKey, rsa.RSAPublicKey]:
    """
    Generate a fresh RSA key pair.

    Returns:
        Tuple of (private_key, public_key)

    Raises:
        KeyGenerationError: the primitive failed (e.g. no entropy available)
    """
    try:
        private_key = rsa.generate_private_key(
            public_exponent=PUBLIC_EXPONENT,
            key_size=KEY_SIZE,
        )
    except Exception as e:
        raise KeyGenerationError("generate_key_pair", f"key creation: {e}") from e
    return private_key, private_key.public_key()


# ============================================================================
# PEM decoding
# ============================================================================

def _first_pem_block(operation: str, data: Union[bytes, str]) -> Tuple[str, bytes]:
    """Return (label, block) for the first PEM block in data. Later blocks are ignored."""
    if isinstance(data, str):
        data = data.encode("ascii", errors="replace")
    match = _PEM_BLOCK.search(data)
    if match is None:
        raise KeyDecodeError(operation, "no PEM block found")
    return match.group(1).decode("ascii", errors="replace"), match.group(0)


def decode_private_key(data: Union[bytes, str]) -> rsa.RSAPrivateKey:
    """
    Load a PEM-encoded RSA private key from a buffer.

    Only the first PEM block is processed; it must be labeled
    "RSA PRIVATE KEY" and hold a PKCS1 RSAPrivateKey.
    """
    label, block = _first_pem_block("decode_private_key", data)
    if label != PRIVATE_KEY_LABEL:
        raise KeyDecodeError(
            "decode_private_key", f"expected a {PRIVATE_KEY_LABEL} block, found {label}"
        )

    try:
        key = serialization.load_pem_private_key(block, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyDecodeError("decode_private_key", f"failed to parse PEM block: {e}") from e
    if not isinstance(key, rsa.RSAPrivateKey):
        raise KeyDecodeError("decode_private_key", "PEM block does not hold an RSA key")
    return key


def decode_public_key(data: Union[bytes, str]) -> rsa.RSAPublicKey:
    """
    Load a PEM-encoded RSA public key from a buffer.

    Only the first PEM block is processed; it must be labeled "PUBLIC KEY".
    The body may be SubjectPublicKeyInfo or a bare PKCS1 RSAPublicKey.
    """
    label, block = _first_pem_block("decode_public_key", data)
    if label != PUBLIC_KEY_LABEL:
        raise KeyDecodeError(
            "decode_public_key", f"expected a {PUBLIC_KEY_LABEL} block, found {label}"
        )

    try:
        key = serialization.load_pem_public_key(block)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        # "RSA PUBLIC KEY" is the label under which the library reads PKCS1
        pkcs1_block = block.replace(b"BEGIN PUBLIC KEY", b"BEGIN RSA PUBLIC KEY").replace(
            b"END PUBLIC KEY", b"END RSA PUBLIC KEY"
        )
        try:
            key = serialization.load_pem_public_key(pkcs1_block)
        except (ValueError, TypeError, UnsupportedAlgorithm):
            raise KeyDecodeError("decode_public_key", f"failed to parse PEM block: {e}") from e
    if not isinstance(key, rsa.RSAPublicKey):
        raise KeyDecodeError("decode_public_key", "PEM block does not hold an RSA key")
    return key


# ============================================================================
# PEM encoding
# ============================================================================

def encode_private_key(key: rsa.RSAPrivateKey) -> bytes:
    """Serialize a private key as PKCS1 DER in an "RSA PRIVATE KEY" PEM block."""
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


def encode_public_key(key: rsa.RSAPublicKey) -> bytes:
    """Serialize a public key as SubjectPublicKeyInfo DER in a "PUBLIC KEY" PEM block."""
    if logger.isEnabledFor(logging.DEBUG):
        der = key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        logger.debug("length of public key: %d", len(der))
    return key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
