"""RSA-PSS payload signing utilities."""

import logging

from .digest import (
    DIGEST_SIZE,
    compute_digest,
    compute_digest_hex,
    compute_digest_b64,
)

from .signatures import (
    sign_digest,
    sign_digest_b64,
    sign_message,
    sign_message_b64,
    sign_file,
    verify_signature,
    verify_signature_b64,
    verify_file,
)

from .keys import (
    generate_key_pair,
    decode_private_key,
    decode_public_key,
    encode_private_key,
    encode_public_key,
)

from .errors import (
    CryptoError,
    FileIOError,
    KeyFileExistsError,
    KeyDecodeError,
    KeyGenerationError,
    SigningError,
    VerificationError,
    VerificationFailure,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Digest
    "DIGEST_SIZE",
    "compute_digest",
    "compute_digest_hex",
    "compute_digest_b64",
    # Signatures
    "sign_digest",
    "sign_digest_b64",
    "sign_message",
    "sign_message_b64",
    "sign_file",
    "verify_signature",
    "verify_signature_b64",
    "verify_file",
    # Keys
    "generate_key_pair",
    "decode_private_key",
    "decode_public_key",
    "encode_private_key",
    "encode_public_key",
    # Errors
    "CryptoError",
    "FileIOError",
    "KeyFileExistsError",
    "KeyDecodeError",
    "KeyGenerationError",
    "SigningError",
    "VerificationError",
    "VerificationFailure",
]
