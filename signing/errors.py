"""
Error types for key handling, signing and verification.

Every error carries the name of the operation that failed so callers can
tell where a failure came from without inspecting tracebacks.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class CryptoError(Exception):
    """Base class for all errors raised by this project."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation}: {detail}")


class FileIOError(CryptoError):
    """Reading or writing a file failed."""

    def __init__(self, operation: str, detail: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        super().__init__(operation, detail)


class KeyFileExistsError(FileIOError):
    """A key file targeted for creation is already present."""


class KeyDecodeError(CryptoError):
    """A PEM block is missing, mislabeled or cannot be parsed."""


class KeyGenerationError(CryptoError):
    """The RSA key generation primitive failed."""


class SigningError(CryptoError):
    """The signature primitive failed."""


class VerificationFailure(Enum):
    NIL_KEY = "nil_key"
    NIL_DIGEST = "nil_digest"
    ENCODING = "encoding"
    MISMATCH = "mismatch"


class VerificationError(CryptoError):
    """A signature could not be verified. `reason` tells why."""

    def __init__(self, operation: str, reason: VerificationFailure, detail: str):
        self.reason = reason
        super().__init__(operation, detail)
