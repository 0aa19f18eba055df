from pathlib import Path
import logging
import os
from typing import BinaryIO, Tuple, Union

from cryptography.hazmat.primitives.asymmetric import rsa

from signing.config import PRIVATE_KEY_FILE_MODE, PUBLIC_KEY_SUFFIX
from signing.errors import FileIOError, KeyFileExistsError
from signing.keys import (
    decode_private_key,
    decode_public_key,
    encode_private_key,
    encode_public_key,
    generate_key_pair,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ============================================================================
# Helper methods
# ============================================================================

def public_key_path(base_path: PathLike) -> Path:
    """Path of the public key belonging to the private key at base_path."""
    return Path(str(base_path) + PUBLIC_KEY_SUFFIX)


def _read_key_file(operation: str, path: PathLike) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileIOError(operation, f"reading file: {e}", path=path) from e


def _private_key_opener(path: str, flags: int) -> int:
    return os.open(path, flags, PRIVATE_KEY_FILE_MODE)


# ============================================================================
# Loading
# ============================================================================

def load_private_key(path: PathLike) -> rsa.RSAPrivateKey:
    """Load a PEM-encoded RSA private key from a file."""
    return decode_private_key(_read_key_file("load_private_key", path))


def load_public_key(path: PathLike) -> rsa.RSAPublicKey:
    """Load a PEM-encoded RSA public key from a file."""
    return decode_public_key(_read_key_file("load_public_key", path))


# ============================================================================
# Writing
# ============================================================================

def write_private_key(fh: BinaryIO, key: rsa.RSAPrivateKey) -> None:
    """
    Write a private key in PEM format to an open binary file.

    The caller owns the handle and is responsible for closing it.
    """
    try:
        fh.write(encode_private_key(key))
    except OSError as e:
        raise FileIOError("write_private_key", str(e), path=getattr(fh, "name", None)) from e


def write_public_key(fh: BinaryIO, key: rsa.RSAPublicKey) -> None:
    """
    Write a public key in PEM format to an open binary file.

    The caller owns the handle and is responsible for closing it.
    """
    try:
        fh.write(encode_public_key(key))
    except OSError as e:
        raise FileIOError("write_public_key", str(e), path=getattr(fh, "name", None)) from e


def _write_new_key_pair(private_fh: BinaryIO, public_fh: BinaryIO) -> None:
    private_key, public_key = generate_key_pair()
    write_private_key(private_fh, private_key)
    write_public_key(public_fh, public_key)


def create_key_pair_files(base_path: PathLike) -> Tuple[Path, Path]:
    """
    Generate a new key pair and store it next to each other on disk.

    The private key goes to base_path, the public key to base_path + ".pub".
    Neither file may exist beforehand. Both are opened in exclusive-create
    mode, so an existing key is never overwritten even if another process
    creates it after the check.

    Args:
        base_path: Where to store the private key

    Returns:
        Tuple of (private_key_path, public_key_path)

    Raises:
        KeyFileExistsError: one of the two files already exists
        FileIOError: a file could not be created or written
        KeyGenerationError: the key pair could not be generated
    """
    private_path = Path(base_path)
    public_path = public_key_path(base_path)

    if private_path.exists():
        raise KeyFileExistsError(
            "create_key_pair_files", f"private key file {private_path} already exists", path=private_path
        )
    if public_path.exists():
        raise KeyFileExistsError(
            "create_key_pair_files", f"public key file {public_path} already exists", path=public_path
        )

    try:
        with open(private_path, "xb", opener=_private_key_opener) as private_fh, \
                open(public_path, "xb") as public_fh:
            _write_new_key_pair(private_fh, public_fh)
    except FileExistsError as e:
        raise KeyFileExistsError(
            "create_key_pair_files", f"key file {e.filename} already exists", path=e.filename
        ) from e
    except OSError as e:
        raise FileIOError(
            "create_key_pair_files", f"creating key file {e.filename}: {e}", path=e.filename
        ) from e

    logger.info("created key pair %s, %s", private_path, public_path)
    return private_path, public_path
