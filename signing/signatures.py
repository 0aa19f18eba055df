"""
Digital Signature Module

Implements RSA-PSS signatures for payload integrity and authenticity.
Uses SHA-256 for hashing and PSS padding with MGF1-SHA256 for signatures.

Signing works on a pre-computed digest. Verification always takes the
original message and recomputes the digest itself, so a signature can never
be checked against a digest that was not derived from the message at hand.
"""

import base64
import binascii
import logging
from pathlib import Path
from typing import Optional, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

from .digest import compute_digest
from .errors import FileIOError, SigningError, VerificationError, VerificationFailure

logger = logging.getLogger(__name__)


def _signing_padding() -> padding.PSS:
    # MAX_LENGTH: salt is key_bytes - digest_size - 2
    return padding.PSS(
        mgf=padding.MGF1(hashes.SHA256()),
        salt_length=padding.PSS.MAX_LENGTH
    )


def _verification_padding() -> padding.PSS:
    return padding.PSS(
        mgf=padding.MGF1(hashes.SHA256()),
        salt_length=padding.PSS.AUTO
    )


def _read_payload(operation: str, path: Union[str, Path]) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileIOError(operation, f"reading {path}: {e}", path=path) from e


# ============================================================================
# Signing
# ============================================================================

def sign_digest(private_key: Optional[rsa.RSAPrivateKey], digest: bytes) -> Optional[bytes]:
    """
    Sign a SHA-256 digest using RSA-PSS.

    Args:
        private_key: RSA private key, or None to disable signing
        digest: The 32-byte SHA-256 digest of the payload

    Returns:
        The signature bytes, or None when no private key was given

    Raises:
        SigningError: the signature primitive rejected the key or digest
    """
    if private_key is None:
        return None
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise SigningError("sign_digest", f"expected an RSA private key, got {type(private_key).__name__}")

    try:
        signature = private_key.sign(
            digest,
            _signing_padding(),
            Prehashed(hashes.SHA256())
        )
    except (ValueError, TypeError) as e:
        raise SigningError("sign_digest", str(e)) from e
    return signature


def sign_digest_b64(private_key: Optional[rsa.RSAPrivateKey], digest: bytes) -> str:
    """Sign a digest and return base64-encoded signature ("" when signing is disabled)."""
    sig = sign_digest(private_key, digest)
    return base64.b64encode(sig or b"").decode("ascii")


def sign_message(private_key: Optional[rsa.RSAPrivateKey], message: Union[bytes, str]) -> Optional[bytes]:
    """Digest a message and sign the digest."""
    return sign_digest(private_key, compute_digest(message))


def sign_message_b64(private_key: Optional[rsa.RSAPrivateKey], message: Union[bytes, str]) -> str:
    """Digest a message and return the base64-encoded signature."""
    return sign_digest_b64(private_key, compute_digest(message))


def sign_file(private_key: Optional[rsa.RSAPrivateKey], path: Union[str, Path]) -> Optional[bytes]:
    """
    Sign the contents of a file.

    Args:
        private_key: RSA private key, or None to disable signing
        path: File whose bytes are digested and signed

    Returns:
        The signature bytes, or None when no private key was given
    """
    data = _read_payload("sign_file", path)
    return sign_digest(private_key, compute_digest(data))


# ============================================================================
# Verification
# ============================================================================

def verify_signature(
    public_key: Optional[rsa.RSAPublicKey],
    signature: Optional[bytes],
    message: Union[bytes, str],
) -> None:
    """
    Verify an RSA-PSS signature over the SHA-256 digest of message.

    The salt length is detected from the signature, so signatures made with
    any PSS salt length verify.

    Args:
        public_key: RSA public key of the signer
        signature: The signature to verify
        message: The original message (not its digest)

    Raises:
        VerificationError: reason NIL_KEY, NIL_DIGEST or MISMATCH
    """
    if public_key is None:
        raise VerificationError("verify_signature", VerificationFailure.NIL_KEY, "public key is None")
    if signature is None:
        raise VerificationError("verify_signature", VerificationFailure.NIL_DIGEST, "signature is None")

    digest = compute_digest(message)
    logger.debug("recalculated digest for message: %s", digest.hex())

    try:
        public_key.verify(
            signature,
            digest,
            _verification_padding(),
            Prehashed(hashes.SHA256())
        )
    except (InvalidSignature, ValueError) as e:
        raise VerificationError(
            "verify_signature", VerificationFailure.MISMATCH, "signature does not match message"
        ) from e


def verify_signature_b64(
    public_key: Optional[rsa.RSAPublicKey],
    signature_b64: Optional[str],
    message: Union[bytes, str],
) -> None:
    """Verify a base64-encoded signature."""
    if signature_b64 is None:
        raise VerificationError("verify_signature_b64", VerificationFailure.NIL_DIGEST, "signature is None")
    try:
        # Line breaks are ignored, as with wrapped base64 from other tools
        unwrapped = signature_b64.replace("\r", "").replace("\n", "")
        sig = base64.b64decode(unwrapped, validate=True)
    except (binascii.Error, ValueError) as e:
        raise VerificationError(
            "verify_signature_b64", VerificationFailure.ENCODING, "decoding base64 string"
        ) from e
    verify_signature(public_key, sig, message)


def verify_file(
    public_key: Optional[rsa.RSAPublicKey],
    signature: Optional[bytes],
    path: Union[str, Path],
) -> None:
    """Verify a signature over the contents of a file."""
    data = _read_payload("verify_file", path)
    verify_signature(public_key, signature, data)
